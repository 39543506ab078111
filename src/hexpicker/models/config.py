"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from hexpicker.exceptions import InvalidHexFormatError
from hexpicker.utils.persistence import PydanticPersistence

from .color import Color
from .data import PickerData
from .enums import OutputFormat, PlaneStrategy, Theme

DEFAULT_CONFIG_DIR = Path.home() / ".hexpicker"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Appearance
    theme: Theme = Field(default=Theme.DARK, description="Start-up theme (dark or light)")
    output: OutputFormat = Field(
        default=OutputFormat.CSS, description="Start-up output format (css or literal)"
    )

    # Picker
    initial_color: str = Field(default="#000000", description="Color selected at start-up")
    plane_strategy: PlaneStrategy = Field(
        default=PlaneStrategy.DYNAMIC,
        description=(
            "How the saturation/value plane is drawn: 'dynamic' re-synthesizes it on every "
            "hue change, 'overlay' composites precomputed weights with the hue color."
        ),
    )
    picker_rows: int = Field(
        default=16, ge=6, le=64, description="Terminal rows used by the plane and hue strip"
    )

    # Copy feedback
    copied_feedback_seconds: float = Field(
        default=1.5, gt=0, description="How long 'Copied!' stays on a copy button"
    )

    @field_validator("initial_color")
    @classmethod
    def validate_initial_color(cls, v: str) -> str:
        """Require '#rrggbb' and store it lowercase."""
        try:
            return Color.from_hex(v).to_hex()
        except InvalidHexFormatError as e:
            # Pydantic only collects ValueError into a ValidationError
            raise ValueError(e.user_message) from e

    def initial_data(self) -> PickerData:
        """Build the start-up data record from these settings."""
        return PickerData.from_color(
            Color.from_hex(self.initial_color),
            theme=self.theme,
            output=self.output,
        )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        A missing file is created with defaults. A corrupted file is left
        in place and defaults are used.

        Args:
            path: Path to config file. If None, uses ~/.hexpicker/config.json.
        """
        return PydanticPersistence.ensure_valid_or_create(path or DEFAULT_CONFIG_PATH, cls)

    @classmethod
    def load(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file, raising on problems.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
