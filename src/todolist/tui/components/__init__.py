"""Pure rendering components returning prompt_toolkit HTML markup."""

from .dialog import render_delete_dialog
from .filters import render_filter_summary, render_option_list
from .footer import render_footer
from .form import (
    render_date_field,
    render_dropdown,
    render_radio_group,
    render_save_button,
    render_text_field,
)
from .header import render_header
from .markup import escape, strip_markup, styled, truncate
from .message import render_message
from .table import (
    Column,
    render_category_table,
    render_project_table,
    render_table,
    render_todo_table,
)

__all__ = [
    "Column",
    "escape",
    "render_category_table",
    "render_date_field",
    "render_delete_dialog",
    "render_dropdown",
    "render_filter_summary",
    "render_footer",
    "render_header",
    "render_message",
    "render_option_list",
    "render_project_table",
    "render_radio_group",
    "render_save_button",
    "render_table",
    "render_text_field",
    "render_todo_table",
    "strip_markup",
    "styled",
    "truncate",
]
