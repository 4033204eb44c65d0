"""Template manager for bundled cabinet configuration templates."""

import json
from importlib import resources
from pathlib import Path
from typing import Any


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "wardrobe": "Full-height wardrobe with backing, kickplate and three shelves",
    "bookcase": "Tall bookcase with a centre divider and five shelves per column",
    "sideboard": "Low sideboard with three columns and four inset doors",
}


class TemplateManager:
    """Access to the bundled configuration templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("bookcase", Path("my-bookcase.json"))
    """

    def __init__(self) -> None:
        self._data_package = "cabinet_panels.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List available templates as (name, description) tuples."""
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        template_file = resources.files(self._data_package).joinpath(f"{name}.json")
        try:
            return template_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def get_template_data(self, name: str) -> dict[str, Any]:
        """Get a template parsed into a dictionary."""
        return json.loads(self.get_template(name))

    def init_template(self, name: str, output_path: Path, force: bool = False) -> None:
        """Copy a template to the specified output path.

        Args:
            name: The template name (without .json extension).
            output_path: The destination path for the template copy.
            force: Overwrite an existing file.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If the output file exists and force is False.
        """
        content = self.get_template(name)
        if output_path.exists() and not force:
            raise FileExistsError(f"File already exists: {output_path}")
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
