"""Log code catalog data model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LogCode:
    code: int
    level: str
    description: str
    human_readable_code: str

    @classmethod
    def from_dict(cls, data: dict) -> "LogCode":
        """Build from a catalog mapping; missing keys fall back to zero values."""
        return cls(
            code=int(data.get("code") or 0),
            level=str(data.get("level") or ""),
            description=str(data.get("description") or ""),
            human_readable_code=str(data.get("humanReadableCode") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "level": self.level,
            "description": self.description,
            "humanReadableCode": self.human_readable_code,
        }


@dataclass(frozen=True)
class Catalog:
    log_codes: tuple[LogCode, ...] = field(default_factory=tuple)
    app_name: str | None = None

    def __len__(self) -> int:
        return len(self.log_codes)

    def human_readable_codes(self) -> list[str]:
        return [lc.human_readable_code for lc in self.log_codes]
