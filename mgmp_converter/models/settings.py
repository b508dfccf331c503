import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mgmp_converter.exceptions import ConfigurationError
from mgmp_converter.io.file_loader import load_structured_file

logger = logging.getLogger(__name__)

DEFAULT_SRS_NAME = "http://www.opengis.net/def/crs/EPSG/0/4326"


class ConverterSettings(BaseModel):
    """Configurable behaviour of the MGMP converter."""

    security_mapping_list: list[str] = Field(
        default_factory=list,
        description=(
            "Entries of the form 'ukGovCode=LOCAL_VALUE' mapping UK government "
            "classification codes to the values used in source records."
        ),
    )
    source_system_name: str | None = Field(
        default=None,
        description=(
            "Name written as the 'sourceSystemName' citation identifier. "
            "Falls back to the record's source id when unset."
        ),
    )
    default_language: str = Field(
        default="eng",
        description="ISO 639 code used when a record carries no language.",
    )
    gml_srs_name: str = Field(
        default=DEFAULT_SRS_NAME,
        description="srsName written on the bounding polygon.",
    )

    model_config = ConfigDict(extra="forbid")

    # ----- validators --------------------------------------------------------
    @field_validator("default_language")
    @classmethod
    def _language_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_language must not be blank")
        return v.strip().lower()

    @classmethod
    def from_file(cls, path: str | Path) -> "ConverterSettings":
        """
        Load settings from a YAML or JSON file.

        Args:
            path: Settings file location.

        Returns:
            The validated settings.

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid.
        """
        file_path = Path(path)
        data = load_structured_file(file_path, ConfigurationError)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Top-level settings object must be a mapping")

        try:
            settings = cls.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            setting = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigurationError(
                f"Invalid settings in {file_path.name}: {first.get('msg')}",
                setting=setting or None,
            ) from exc

        logger.debug(f"Loaded converter settings from {file_path}")
        return settings
