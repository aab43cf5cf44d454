"""Model for a single bundle module as delivered by the manifest parser."""

from pydantic import BaseModel, ConfigDict, Field

BASE_MODULE_NAME = "base"
DEFAULT_MIN_SDK_VERSION = 1


class BundleModule(BaseModel):
    """An already-parsed module record.

    The name is assigned by the module's container, not by its manifest.
    All other fields are the attributes extracted from the manifest.
    """

    name: str = Field(min_length=1)
    split_id: str | None = Field(alias="splitId", default=None)
    on_demand: bool = Field(alias="onDemand", default=False, strict=True)
    min_sdk_version: int | None = Field(alias="minSdkVersion", default=None, ge=0, strict=True)
    # Order and multiplicity are kept as declared
    uses_split: list[str] = Field(alias="usesSplit", default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    @property
    def is_base(self) -> bool:
        """Check if this is the mandatory base module."""
        return self.name == BASE_MODULE_NAME

    @property
    def is_install_time(self) -> bool:
        return not self.on_demand

    @property
    def effective_min_sdk_version(self) -> int:
        """Declared minSdkVersion, or the platform floor when undeclared.

        The floor is a fixed constant and is never inherited from base.
        """
        if self.min_sdk_version is None:
            return DEFAULT_MIN_SDK_VERSION
        return self.min_sdk_version

    @property
    def delivery_mode(self) -> str:
        return "on-demand" if self.on_demand else "install-time"
