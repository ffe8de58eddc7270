"""Container engine platform type."""

from pydantic import BaseModel, ConfigDict

# uname-style names some engines report, mapped to release archive names
_ARCH_ALIASES = {
    "x86_64": "amd64",
    "aarch64": "arm64",
    "armv7l": "arm",
}


class Platform(BaseModel):
    """
    Operating system and architecture pair of the container engine host.

    The pair addresses the civo release archive, e.g. ``linux/amd64`` selects
    ``civo-1.0.75-linux-amd64.tar.gz``.
    """

    model_config = ConfigDict(frozen=True)

    os: str
    arch: str

    @classmethod
    def from_string(cls, value: str) -> "Platform":
        """
        Parse an ``os/arch[/variant]`` platform string.

        Args:
        ----
            value: Platform string as reported by the engine (e.g. "linux/amd64")

        Returns:
        -------
            Corresponding Platform (variant is dropped)

        Raises:
        ------
            ValueError: If value has no os/arch separator or an empty part

        Example:
        -------
            >>> Platform.from_string("linux/arm64/v8")
            Platform(os='linux', arch='arm64')
            >>> Platform.from_string("linux/x86_64")
            Platform(os='linux', arch='amd64')

        """
        parts = value.strip().lower().split("/")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise ValueError(f"Invalid platform: '{value}'. Expected format 'os/arch'")

        arch = _ARCH_ALIASES.get(parts[1], parts[1])
        return cls(os=parts[0], arch=arch)

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"
