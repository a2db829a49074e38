"""
HTML Output Constants

Tag templates emitted by the rewrite passes. Class names are Tailwind utility
classes matching the preview host's stylesheet; attributes are single-quoted so
that the outer wrapper can use double quotes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeaderStyles:
    """Header block and name heading."""
    CENTER_BLOCK: str = "<div class='text-center mb-4 pb-3 border-b-2 border-gray-200'>{content}</div>"
    NAME: str = "<h1 class='text-3xl font-bold mb-2 text-gray-900'>{content}</h1>"


@dataclass(frozen=True)
class SectionStyles:
    SECTION: str = (
        "<h2 class='text-lg font-bold mt-4 mb-2 pb-1 border-b-2 border-gray-300 "
        "uppercase text-gray-900'>{content}</h2>"
    )
    SUBSECTION: str = "<h3 class='text-base font-semibold mt-3 mb-1 text-gray-800'>{content}</h3>"
    SMALL_BLOCK: str = "<div class='text-sm text-gray-700 leading-relaxed mb-3'>{content}</div>"
    SMALL_INLINE: str = "<div class='text-sm text-gray-600 mt-1'>{content}</div>"


@dataclass(frozen=True)
class ListStyles:
    """
    List macros and environments.

    ITEM is an opening tag only; \\item carries no closing delimiter to map from.
    """
    SUBHEADING_LIST_OPEN: str = "<div class='space-y-3 mt-2'>"
    SUBHEADING_LIST_CLOSE: str = "</div>"
    ITEM_LIST_OPEN: str = "<ul class='list-disc list-inside mt-1 space-y-1 ml-4'>"
    ITEM_LIST_CLOSE: str = "</ul>"
    RESUME_ITEM: str = "<li class='text-sm text-gray-700'>{content}</li>"
    ITEMIZE_OPEN: str = "<ul class='list-disc list-inside mt-2 space-y-1 ml-4'>"
    ITEMIZE_CLOSE: str = "</ul>"
    ENUMERATE_OPEN: str = "<ol class='list-decimal list-inside mt-2 space-y-1 ml-4'>"
    ENUMERATE_CLOSE: str = "</ol>"
    ITEM: str = "<li class='text-sm'>"


@dataclass(frozen=True)
class EntryStyles:
    """Two-column rows for project headings and subheadings."""
    BLOCK: str = "<div class='mb-3'>{rows}</div>"
    ROW: str = "<div class='flex justify-between items-baseline flex-wrap'>{left}{right}</div>"
    PRIMARY: str = "<h3 class='text-base font-semibold'>{content}</h3>"
    SECONDARY: str = "<p class='text-sm italic text-gray-700'>{content}</p>"
    ASIDE: str = "<span class='text-sm text-gray-600'>{content}</span>"


@dataclass(frozen=True)
class InlineStyles:
    EMPH: str = "<em class='text-gray-600'>{content}</em>"
    BOLD: str = "<strong class='font-semibold'>{content}</strong>"
    ITALIC: str = "<em class='italic'>{content}</em>"
    UNDERLINE: str = "<u>{content}</u>"
    SMALL_CAPS: str = "<span class='uppercase tracking-wide text-sm'>{content}</span>"
    LINE_BREAK: str = "<br/>"


@dataclass(frozen=True)
class LinkStyles:
    MAILTO: str = "<a href='{url}' class='text-blue-600 hover:underline'>{label}</a>"
    EXTERNAL: str = "<a href='{url}' class='text-blue-600 hover:underline' target='_blank'>{label}</a>"


@dataclass(frozen=True)
class PageStyles:
    WRAPPER: str = (
        '<div class="max-w-4xl mx-auto bg-white min-h-full" style="padding: {padding};">\n'
        "    {content}\n"
        "  </div>"
    )
    PLACEHOLDER: str = (
        "<div class='flex items-center justify-center h-full text-gray-400'>"
        "<p>{text}</p></div>"
    )
    DEFAULT_PLACEHOLDER_TEXT: str = "Start filling the form to see your resume..."
    DEFAULT_PADDING: str = "0.5in"
