import io

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from grocer.domain.GroceryList import GroceryList
from grocer.logic.grocery.formatting import format_amount
from grocer.utilities.constants import DISPLAY_DATE_FORMAT


def _title(grocery_list: GroceryList) -> str:
    if grocery_list.start and grocery_list.end:
        start = grocery_list.start.strftime(DISPLAY_DATE_FORMAT)
        end = grocery_list.end.strftime(DISPLAY_DATE_FORMAT + ", %Y")
        return f"Grocery List – {start} - {end}"
    return "Grocery List"


def generate_pdf_for_grocery_list(grocery_list: GroceryList):
    """Generate a printable checklist: [ ] / Item / Quantity / Used in."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(_title(grocery_list), styles["Title"]),
        Spacer(1, 16),
    ]

    if not grocery_list.items:
        elements.append(Paragraph("No items needed. Add recipes to your meal plan to generate a list.",
                                  styles["Normal"]))
        doc.build(elements)
        return buf.getvalue()

    data = [["", "Item", "Quantity", "Used in"]]
    for item in grocery_list.items:
        data.append([
            "[ ]",
            item.display_name,
            format_amount(item),
            Paragraph(", ".join(item.recipe_names()), styles["BodyText"]),
        ])

    table = Table(data, repeatRows=1, colWidths=[30, 170, 90, 250])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2563EB")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (0, -1), "CENTER"),
        ("ALIGN", (2, 1), (2, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
