"""
Template identifier resolution.

Each of the ten preview templates is a TemplateStyle: the cosmetic choices
the preview component reads when rendering. Templates do no computation of
their own; they only display the TotalsSummary they are given. Unknown or
empty identifiers resolve to the modern template.
"""

from dataclasses import asdict, dataclass

from invoice_studio.models.invoice import TemplateType

DEFAULT_TEMPLATE = TemplateType.MODERN


@dataclass(frozen=True, slots=True)
class TemplateStyle:
    """Cosmetic settings for one preview template."""

    name: TemplateType
    label: str
    font_family: str = "Inter, sans-serif"
    background: str = "#ffffff"
    text_color: str = "#0f172a"
    muted_color: str = "#64748b"
    header: str = "split"
    table: str = "lined"
    use_brand_color: bool = True
    uppercase_title: bool = False

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary for the UI state."""
        data = asdict(self)
        data["name"] = self.name.value
        return data


TEMPLATE_STYLES: dict[TemplateType, TemplateStyle] = {
    style.name: style
    for style in (
        TemplateStyle(TemplateType.MODERN, "Modern"),
        TemplateStyle(
            TemplateType.CLASSIC,
            "Classic",
            font_family="Merriweather, serif",
            header="centered",
            table="boxed",
        ),
        TemplateStyle(
            TemplateType.MINIMAL,
            "Minimal",
            header="stacked",
            table="plain",
            use_brand_color=False,
        ),
        TemplateStyle(
            TemplateType.BOLD,
            "Bold",
            font_family="Montserrat, sans-serif",
            header="banner",
            uppercase_title=True,
        ),
        TemplateStyle(
            TemplateType.AGENCY,
            "Agency",
            font_family="Poppins, sans-serif",
            background="#09090b",
            text_color="#fafafa",
            muted_color="#a1a1aa",
            header="banner",
            table="plain",
        ),
        TemplateStyle(
            TemplateType.BOUTIQUE,
            "Boutique",
            font_family="Playfair Display, serif",
            background="#fdfbf7",
            header="centered",
            table="plain",
        ),
        TemplateStyle(
            TemplateType.TECH,
            "Tech",
            font_family="Inconsolata, monospace",
            background="#0f172a",
            text_color="#e2e8f0",
            muted_color="#94a3b8",
            use_brand_color=False,
        ),
        TemplateStyle(
            TemplateType.FINANCE,
            "Finance",
            font_family="Roboto, sans-serif",
            table="boxed",
            use_brand_color=False,
        ),
        TemplateStyle(
            TemplateType.CREATIVE,
            "Creative",
            font_family="Outfit, sans-serif",
            header="stacked",
            table="cards",
        ),
        TemplateStyle(
            TemplateType.SIMPLE,
            "Simple",
            header="stacked",
            table="lined",
            use_brand_color=False,
        ),
    )
}


def resolve_template(identifier: str | TemplateType | None) -> TemplateStyle:
    """
    Return the style for a template identifier.

    Args:
        identifier: Template name such as ``"classic"``; case-insensitive.

    Returns:
        The matching TemplateStyle, or the modern style when the identifier
        is empty or unrecognized.
    """
    if isinstance(identifier, TemplateType):
        return TEMPLATE_STYLES[identifier]
    try:
        template = TemplateType((identifier or "").strip().lower())
    except ValueError:
        template = DEFAULT_TEMPLATE
    return TEMPLATE_STYLES[template]
