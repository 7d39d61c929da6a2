from enum import Enum


class ParseMode(str, Enum):
    """https://core.telegram.org/bots/api#formatting-options"""
    markdown = "Markdown"
    markdown_v2 = "MarkdownV2"
    html = "HTML"
