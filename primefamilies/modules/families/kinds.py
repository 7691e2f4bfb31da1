"""Family kinds - the closed set of prime families the library knows."""

from enum import Enum
from typing import List, Union

from primefamilies.core.errors import ValidationError


class FamilyKind(str, Enum):
    """Prime family discriminator (lookup tag and cache-key component)."""
    MERSENNE = "mersenne"
    SOPHIE_GERMAIN = "sophie_germain"
    TWIN = "twin"
    PALINDROMIC = "palindromic"
    SEXY = "sexy"
    COUSIN = "cousin"
    EMIRP = "emirp"
    SAFE = "safe"
    CHEN = "chen"
    CIRCULAR = "circular"
    FERMAT = "fermat"
    CUBAN = "cuban"
    EULER_BINOMIAL_LIKE = "euler_binomial_like"
    PROTH = "proth"
    CULLEN = "cullen"
    WOODALL = "woodall"
    THABIT = "thabit"
    EUCLID = "euclid"
    FIBONACCI = "fibonacci"
    PERRIN = "perrin"
    HAPPY = "happy"
    WILSON = "wilson"
    CENTERED_HEXAGONAL = "centered_hexagonal"

    @classmethod
    def all(cls) -> List["FamilyKind"]:
        """All kinds in declaration order."""
        return list(cls)

    @classmethod
    def parse(cls, name: Union[str, "FamilyKind"]) -> "FamilyKind":
        """
        Resolve a kind from its value or member name (case-insensitive).

        Raises:
            ValidationError: Unknown family name
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        for kind in cls:
            if normalized in (kind.value, kind.name.lower()):
                return kind
        raise ValidationError(
            f"Unknown prime family: {name!r}",
            data={"name": str(name)},
        )

    def __str__(self) -> str:
        return self.value
