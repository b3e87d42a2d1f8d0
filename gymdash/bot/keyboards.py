from __future__ import annotations

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from gymdash.reports.date_range import RANGE_LABELS, RangeId


# Ranges offered as buttons; custom ranges are typed as command arguments
_RANGE_ROWS: tuple[tuple[RangeId, ...], ...] = (
    (RangeId.TODAY, RangeId.YESTERDAY),
    (RangeId.LAST_7_DAYS, RangeId.LAST_30_DAYS),
    (RangeId.THIS_MONTH, RangeId.LAST_MONTH),
    (RangeId.LAST_3_MONTHS, RangeId.THIS_YEAR),
)


class Keyboards:
    """
    Centralized keyboard/button builder for consistent UI.
    """

    @staticmethod
    def main_menu() -> InlineKeyboardMarkup:
        """Main menu buttons."""
        buttons = [
            [
                InlineKeyboardButton(text="📊 Report", callback_data="report:thisMonth"),
                InlineKeyboardButton(text="💰 Revenue", callback_data="revenue:thisMonth"),
            ],
            [
                InlineKeyboardButton(text="🏃 Activity", callback_data="activity:last7Days"),
                InlineKeyboardButton(text="🕒 Recent", callback_data="recent"),
            ],
        ]
        return InlineKeyboardMarkup(inline_keyboard=buttons)

    @staticmethod
    def range_menu(view: str, selected: RangeId | None = None) -> InlineKeyboardMarkup:
        """Date range picker; callback data is `<view>:<range id>`."""
        buttons = []
        for row in _RANGE_ROWS:
            buttons.append(
                [
                    InlineKeyboardButton(
                        text=("✓ " if rid is selected else "") + RANGE_LABELS[rid],
                        callback_data=f"{view}:{rid.value}",
                    )
                    for rid in row
                ]
            )
        return InlineKeyboardMarkup(inline_keyboard=buttons)


class MessageTemplates:
    """
    Standardized message templates for consistent formatting.
    """

    @staticmethod
    def header(title: str, emoji: str = "📋") -> str:
        """Format a header."""
        return f"<b>{emoji} {title}</b>"

    @staticmethod
    def section(title: str, emoji: str = "•") -> str:
        return f"\n<b>{emoji} {title}</b>"

    @staticmethod
    def item(text: str, indent: int = 1) -> str:
        return "  " * indent + f"• {text}"

    @staticmethod
    def error(message: str) -> str:
        return f"❌ <b>Error:</b> {message}"

    @staticmethod
    def stat(label: str, value: str, unit: str = "") -> str:
        """Format a statistic item."""
        return f"  <b>{label}:</b> {value}{' ' + unit if unit else ''}"

    @staticmethod
    def money(amount) -> str:
        return f"${amount:,.2f}"
