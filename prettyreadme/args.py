"""Validation of the docify argument list."""

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ArgumentShapeError

EXPECTED_SHAPE = 'expected "<readme_path>", "<docs_url>", "<replacement_docs_url>"'


class DocifyArgs(BaseModel):
    """The three string arguments of docify, in order."""

    model_config = ConfigDict(strict=True, frozen=True)

    readme_path: str = Field(..., description="Readme path, relative to the project root")
    docs_url: str = Field(..., description="Docs URL to replace, matched literally")
    replacement_url: str = Field(..., description="Text substituted for every docs URL")

    @classmethod
    def from_args(cls, args: Sequence) -> "DocifyArgs":
        """Build from positional arguments.

        Raises:
            ArgumentShapeError: Not exactly three arguments, or one is not a string
        """
        if len(args) != 3:
            raise ArgumentShapeError(f"{EXPECTED_SHAPE}, got {len(args)} argument(s)")

        readme_path, docs_url, replacement_url = args
        try:
            return cls(readme_path=readme_path, docs_url=docs_url, replacement_url=replacement_url)
        except ValidationError as e:
            error = e.errors()[0]
            argument = str(error["loc"][0]) if error["loc"] else None
            raise ArgumentShapeError(
                f"{EXPECTED_SHAPE}; {argument} must be a string literal, got {type(error['input']).__name__}",
                argument=argument,
            ) from e
