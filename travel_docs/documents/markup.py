"""
Export of DocumentContent to plain text and to print-ready HTML.

Both exports are deterministic: equal content gives byte-identical output.
The HTML is a standalone A4 page with inline CSS and no script; every value
is escaped. Printing it is up to the caller.
"""

from html import escape

from travel_docs.core.domain.document import (
    ChoiceSection,
    ClauseSection,
    DocumentContent,
    FieldSection,
    Section,
    TableRow,
    TableSection,
)

CHECKED = "[X]"
UNCHECKED = "[ ]"


# =============================================================================
# PLAIN TEXT
# =============================================================================


def _table_lines(section: TableSection) -> list[str]:
    all_rows = [section.columns] + [row.cells for row in section.rows]
    if section.footer is not None:
        all_rows.append(section.footer.cells)
    widths = [max(len(cells[i]) if i < len(cells) else 0 for cells in all_rows) for i in range(len(section.columns))]

    def line(cells: tuple[str, ...], marker: str = " ") -> str:
        padded = [cell.ljust(widths[i]) for i, cell in enumerate(cells)]
        return f"{marker} " + " | ".join(padded).rstrip()

    separator = "  " + "-+-".join("-" * width for width in widths)
    lines = [line(section.columns), separator]
    lines.extend(line(row.cells, "*" if row.highlighted else " ") for row in section.rows)
    if section.footer is not None:
        lines.append(separator)
        lines.append(line(section.footer.cells))
    return lines


def _section_lines(section: Section) -> list[str]:
    lines: list[str] = []
    if section.heading:
        lines.extend([section.heading, "-" * len(section.heading)])

    if isinstance(section, ClauseSection):
        lines.extend(section.paragraphs)
    elif isinstance(section, FieldSection):
        lines.extend(f"{entry.label}: {entry.value}".rstrip() for entry in section.fields)
    elif isinstance(section, ChoiceSection):
        lines.append(
            "  ".join(
                f"{CHECKED if option.selected else UNCHECKED} {option.label}"
                for option in section.options
            )
        )
    else:
        lines.extend(_table_lines(section))
    return lines


def render_text(content: DocumentContent) -> str:
    """Plain-text rendition, one blank line between sections."""
    lines = [content.title, "=" * len(content.title)]
    for section in content.sections:
        lines.append("")
        lines.extend(_section_lines(section))
    return "\n".join(lines) + "\n"


# =============================================================================
# HTML
# =============================================================================

PRINT_CSS = """
    @page { size: A4; margin: 10mm; }
    body { font-family: Arial, sans-serif; font-size: 11px; color: #000; margin: 0; }
    .header { background-color: #333; color: #fff; text-align: center; padding: 8px; font-size: 16px; font-weight: bold; margin-bottom: 10px; }
    .section-title { background-color: #333; color: #fff; padding: 4px 8px; font-weight: bold; margin-top: 15px; margin-bottom: 8px; }
    .clause p { text-align: justify; line-height: 1.4; margin: 4px 0; }
    .fields { display: flex; flex-wrap: wrap; gap: 6px 12px; }
    .field { display: flex; align-items: flex-end; }
    .field .label { font-weight: bold; margin-right: 5px; }
    .field .value { border: 1px solid #000; padding: 2px 5px; min-width: 120px; min-height: 14px; font-family: monospace; }
    .choices { display: flex; gap: 15px; }
    table { width: 100%; border-collapse: collapse; }
    th, td { border: 1px solid #ddd; padding: 4px 6px; text-align: left; }
    th { background-color: #f3f4f6; }
    tr.highlighted td { font-weight: bold; }
    tfoot td { font-weight: bold; background-color: #f3f4f6; }
"""


def _html_row(row: TableRow, tag: str = "td") -> str:
    css = " class='highlighted'" if row.highlighted and tag == "td" else ""
    cells = "".join(f"<{tag}>{escape(cell)}</{tag}>" for cell in row.cells)
    return f"<tr{css}>{cells}</tr>"


def _section_html(section: Section) -> str:
    parts = [f"<section class='{escape(type(section).__name__.lower())}' id='{escape(section.key)}'>"]
    if section.heading:
        parts.append(f"<div class='section-title'>{escape(section.heading)}</div>")

    if isinstance(section, ClauseSection):
        parts.append("<div class='clause'>")
        parts.extend(f"<p>{escape(paragraph)}</p>" for paragraph in section.paragraphs)
        parts.append("</div>")
    elif isinstance(section, FieldSection):
        parts.append("<div class='fields'>")
        for entry in section.fields:
            parts.append(
                f"<div class='field'><span class='label'>{escape(entry.label)}:</span>"
                f"<span class='value'>{escape(entry.value) or '&nbsp;'}</span></div>"
            )
        parts.append("</div>")
    elif isinstance(section, ChoiceSection):
        parts.append("<div class='choices'>")
        for option in section.options:
            mark = CHECKED if option.selected else UNCHECKED
            parts.append(f"<span class='choice'>{mark} {escape(option.label)}</span>")
        parts.append("</div>")
    else:
        parts.append("<table>")
        parts.append("<thead>" + _html_row(TableRow(cells=section.columns), tag="th") + "</thead>")
        parts.append("<tbody>" + "".join(_html_row(row) for row in section.rows) + "</tbody>")
        if section.footer is not None:
            parts.append("<tfoot>" + _html_row(section.footer) + "</tfoot>")
        parts.append("</table>")

    parts.append("</section>")
    return "\n".join(parts)


def render_html(content: DocumentContent) -> str:
    """Standalone print page for the document."""
    title = escape(content.title)
    html_parts = [
        "<!DOCTYPE html>",
        "<html lang='pt-BR'>",
        "<head>",
        "<meta charset='utf-8'>",
        f"<title>{title}</title>",
        f"<style>{PRINT_CSS}</style>",
        "</head>",
        "<body>",
        f"<div class='header'>{title}</div>",
    ]
    html_parts.extend(_section_html(section) for section in content.sections)
    html_parts.extend(["</body>", "</html>"])
    return "\n".join(html_parts) + "\n"
