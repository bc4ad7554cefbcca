"""Schema checks for program.json documents.

The schema ships inside the package and is read once per process.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "program.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Return the bundled program.json schema.

    Raises:
        FileNotFoundError: If the package was installed without its schema
    """
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_program(document: Any) -> None:
    """Check a decoded program.json document.

    Raises:
        ValidationError: If an entry or a top-level field breaks the schema
    """
    jsonschema.validate(instance=document, schema=load_schema())


def describe_validation_error(error: ValidationError) -> str:
    """Render a schema violation as ``Validation error at <path>: <message>``."""
    location = " -> ".join(str(p) for p in error.path) if error.path else "root"
    return f"Validation error at {location}: {error.message}"


def validate_program_with_error_details(document: Any) -> tuple[bool, str | None]:
    """Check a document without raising.

    Returns:
        ``(True, None)`` for a valid manifest, otherwise ``(False, message)``
    """
    try:
        validate_program(document)
    except ValidationError as e:
        return False, describe_validation_error(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
    return True, None
