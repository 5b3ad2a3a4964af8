"""Entry point for running todolist as a module."""

# main() in cli.py is the error boundary; prompt_toolkit restores the
# terminal before any exception reaches it.

from todolist.cli import main

if __name__ == "__main__":
    main()
