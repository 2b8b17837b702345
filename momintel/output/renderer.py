"""Jinja2-based renderer for the Minutes of Meeting document."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from momintel.output.schemas import MomContext

TEMPLATE_DIR = Path(__file__).parent / "templates"


class MomRenderer:
    """Render the MoM text from a Jinja2 template.

    Section order, headers and empty-section placeholders live in the
    template; the renderer only supplies the flattened context.
    """

    def __init__(self, template_dir: str | Path = TEMPLATE_DIR):
        """Initialize renderer with template directory.

        Args:
            template_dir: Directory containing .txt.j2 templates.
                          Defaults to the templates shipped with the package.
        """
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "htm"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, context: MomContext, template_name: str = "mom") -> str:
        """Render the MoM as plain text.

        Args:
            context: MomContext with all meeting data
            template_name: Base name of template (without .txt.j2)

        Returns:
            Rendered MoM text

        Raises:
            TemplateNotFound: If the template file doesn't exist
        """
        template = self.env.get_template(f"{template_name}.txt.j2")
        return template.render(context.model_dump())


__all__ = ["MomRenderer", "TemplateNotFound"]
