"""
PDF project quote generator.

Renders an already-priced project (see PricingEngine.build_project_quote)
into a quote document. Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header + client
2. One block per unit: summary, price breakdown, cut list when available
3. Project total
4. Terms
"""

from datetime import datetime

from fpdf import FPDF

from .config import settings

OPENING_NAMES = {
    "fixed": "Fixed",
    "slider": "Slider",
    "projecting": "Projecting",
    "awning": "Awning",
    "casement_left": "Casement (left)",
    "casement_right": "Casement (right)",
    "tilt_turn": "Tilt & turn",
    "door_left": "Door (left hand)",
    "door_right": "Door (right hand)",
    "door_with_sidelites": "Door with sidelites",
    "sliding_door": "Sliding door",
}

FAMILY_NAMES = {
    "aluminum": "Aluminum",
    "pvc": "PVC",
}


def generate_unit_summary(config, labels: dict = None) -> str:
    """
    Plain-language one-liner for a unit, used in the PDF and project listings.
    labels maps catalog keys to display names (line, glass, color).
    """
    labels = labels or {}
    opening = OPENING_NAMES.get(config.opening_type.value, config.opening_type.value)
    parts = [f"{config.overall_width} x {config.overall_height} mm {opening.lower()}"]
    if config.sash_count > 1:
        parts.append(f"{config.sash_count} sashes ({config.layout_axis.value})")
    if config.line_key:
        parts.append(f"{labels.get(config.line_key, config.line_key)} line")
    parts.append(f"{labels.get(config.glass_key, config.glass_key)} glass")
    parts.append(f"{labels.get(config.color_key, config.color_key)} frame")
    return ", ".join(parts) + "."


def _fmt(amount) -> str:
    """Format a whole-unit amount as $X,XXX"""
    try:
        return f"{settings.CURRENCY_SYMBOL}{round(float(amount)):,}"
    except (ValueError, TypeError):
        return f"{settings.CURRENCY_SYMBOL}0"


def _fmt_mm(value) -> str:
    try:
        return f"{float(value):g}"
    except (ValueError, TypeError):
        return "-"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class ProjectPDF(FPDF):
    """Custom PDF class for project quote documents."""

    def __init__(self, company_name=""):
        super().__init__()
        self.company_name = company_name
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # We handle headers manually per section

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, _safe(f"  {title}"), fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "R" if label in ("Qty", "Length", "Amount", "Width", "Height") else "L"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths, right_from=None):
        """Render a table data row. Columns from right_from onwards are right-aligned."""
        self.set_font("Helvetica", "", 8)
        if right_from is None:
            right_from = len(widths) - 1
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "R" if i >= right_from else "L"
            self.cell(width, 5.5, _safe(str(val)), align=align)
        self.ln()

    def subtotal_row(self, label, amount):
        """Render a subtotal row spanning the full width."""
        self.set_font("Helvetica", "B", 9)
        self.cell(140, 6, _safe(label), align="R", border="T")
        self.cell(50, 6, _fmt(amount), align="R", border="T")
        self.ln(8)


def _render_cut_list(pdf: ProjectPDF, cut_list: dict):
    pdf.set_font("Helvetica", "B", 9)
    title = "Cut list"
    if cut_list.get("provisional"):
        title += " (provisional formulas - verify before cutting)"
    pdf.cell(0, 6, title, new_x="LMARGIN", new_y="NEXT")

    cols = [("Code", 25), ("Piece", 75), ("Formula", 40), ("Qty", 20), ("Length", 30)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)
    for item in cut_list.get("profiles", []) + cut_list.get("reinforcements", []):
        pdf.table_row(
            [item["code"], item["description"][:45], item["formula"],
             str(item["quantity"]), f"{_fmt_mm(item['length_mm'])} mm"],
            widths,
            right_from=3,
        )

    glass = cut_list.get("glass_panes") or {}
    if glass:
        pdf.set_font("Helvetica", "", 8)
        pdf.cell(
            0, 5.5,
            _safe(f"Glass: {glass['count']} x {_fmt_mm(glass['width_mm'])} x "
                  f"{_fmt_mm(glass['height_mm'])} mm ({glass['thickness_mm']} mm)"),
            new_x="LMARGIN", new_y="NEXT",
        )

    hardware = cut_list.get("hardware", [])
    if hardware:
        pdf.set_font("Helvetica", "B", 8)
        pdf.cell(0, 5.5, "Hardware", new_x="LMARGIN", new_y="NEXT")
        for item in hardware:
            pdf.set_font("Helvetica", "", 8)
            pdf.cell(140, 5, _safe(f"  {item['description'][:70]}"))
            pdf.cell(50, 5, _safe(f"{item['quantity']} {item['unit']}"), align="R")
            pdf.ln()
    pdf.ln(3)


def generate_project_pdf(project: dict, quote: dict, unit_details: list = None) -> bytes:
    """
    Generate a PDF quote for a project.

    Args:
        project: project fields (project_number, name, client_name, ...)
        quote: output of PricingEngine.build_project_quote
        unit_details: per unit, {"summary": str, "cut_list": dict or None}

    Returns:
        PDF bytes
    """
    unit_details = unit_details or [{} for _ in quote.get("units", [])]
    company_info = " | ".join(p for p in [settings.COMPANY_EMAIL, settings.COMPANY_PHONE] if p)

    pdf = ProjectPDF(company_name=settings.COMPANY_NAME)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(settings.COMPANY_NAME), new_x="LMARGIN", new_y="NEXT")
    if company_info:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(company_info), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    created = project.get("created_at")
    if isinstance(created, datetime):
        date_str = created.strftime("%B %d, %Y")
    else:
        date_str = datetime.utcnow().strftime("%B %d, %Y")

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, _safe(f"QUOTE #{project.get('project_number', '?')}"), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {date_str}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Valid for: {settings.QUOTE_VALID_DAYS} days", new_x="LMARGIN", new_y="NEXT")

    client = project.get("client_name")
    if client:
        pdf.ln(2)
        pdf.cell(0, 5, _safe(f"Prepared for: {client}"), new_x="LMARGIN", new_y="NEXT")
        if project.get("client_address"):
            pdf.cell(0, 5, _safe(project["client_address"]), new_x="LMARGIN", new_y="NEXT")

    pdf.ln(4)
    family = FAMILY_NAMES.get(project.get("material_family"), project.get("material_family", ""))
    pdf.set_font("Helvetica", "B", 11)
    pdf.cell(0, 6, _safe(f"Project: {project.get('name', '')} ({family})"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 2: Units ──
    breakdown_cols = [("Item", 140), ("Amount", 50)]
    breakdown_widths = [c[1] for c in breakdown_cols]
    for unit, details in zip(quote.get("units", []), unit_details):
        pdf.section_header(f"UNIT {unit['index'] + 1}")
        summary = details.get("summary")
        if summary:
            pdf.set_font("Helvetica", "", 9)
            pdf.multi_cell(0, 4.5, _safe(summary))
            pdf.ln(2)

        pdf.table_header(breakdown_cols)
        for item in unit["breakdown"]["items"]:
            pdf.table_row([item["description"][:80], _fmt(item["amount"])], breakdown_widths)
        pdf.subtotal_row("Unit price", unit["price"])

        if details.get("cut_list"):
            _render_cut_list(pdf, details["cut_list"])

    # ── SECTION 3: Project Total ──
    pdf.section_header("PROJECT TOTAL")
    pdf.set_font("Helvetica", "", 10)
    for unit in quote.get("units", []):
        pdf.cell(130, 6, f"Unit {unit['index'] + 1}")
        pdf.cell(60, 6, _fmt(unit["price"]), align="R")
        pdf.ln()

    pdf.set_draw_color(200, 200, 200)
    pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
    pdf.ln(1)
    pdf.set_font("Helvetica", "B", 10)
    pdf.cell(130, 7, "Subtotal")
    pdf.cell(60, 7, _fmt(quote.get("subtotal", 0)), align="R")
    pdf.ln()

    adjustment_pct = quote.get("adjustment_pct", 0)
    if adjustment_pct:
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(130, 6, f"Adjustment ({adjustment_pct:g}%)")
        pdf.cell(60, 6, _fmt(quote.get("adjustment", 0)), align="R")
        pdf.ln()

    pdf.ln(1)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  QUOTE TOTAL", fill=True)
    pdf.cell(60, 10, f"{_fmt(quote.get('total', 0))}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    # ── SECTION 4: Terms ──
    if project.get("notes"):
        pdf.section_header("NOTES")
        pdf.set_font("Helvetica", "", 8)
        pdf.multi_cell(0, 4.5, _safe(project["notes"]))
        pdf.ln(3)

    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.set_x(pdf.l_margin)
    pdf.cell(pw, 4, f"This quote is valid for {settings.QUOTE_VALID_DAYS} days from the date above.",
             new_x="LMARGIN", new_y="NEXT")
    pdf.cell(pw, 4, "Measurements to be confirmed on site before manufacturing.",
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return pdf.output()
