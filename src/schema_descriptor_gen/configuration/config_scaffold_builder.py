"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "descriptor-gen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration template for schema-descriptor-gen.
# Replace every <REQUIRED> placeholder before running generate.
# Replace <OPTIONAL> placeholders only when your setup needs them.

source:
  # Choose exactly one schema document source (url or path).
  url: "https://github.com/github/rest-api-description/raw/refs/heads/main/descriptions/ghec/ghec.yaml"
  # path: "<OPTIONAL>"  # relative paths resolve against this file

output:
  # array_literal writes {"name","descriptor"}, rows; lookup_chain writes if/return statements.
  format: "array_literal"
  path: "<REQUIRED>"
  # function_name and builder_name only apply to lookup_chain.
  # function_name: "<OPTIONAL>"
  # builder_name: "<OPTIONAL>"

http:
  timeout_seconds: 60
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
