from pydantic import Field, field_validator

from mwquery.models.base import MWModel
from mwquery.models.enums import RedirectFilter


class QueryDescriptor(MWModel):
    """Immutable parameters identifying what a list query asks for.

    ``namespaces=None`` means unrestricted; it is never read as namespace 0.
    """

    title: str | None = None
    redirect_filter: RedirectFilter = RedirectFilter.all
    namespaces: tuple[int, ...] | None = None
    limit: int = Field(default=50, gt=0)
    prefix: str | None = None
    props: tuple[str, ...] | None = None

    @field_validator("namespaces", mode="before")
    @classmethod
    def _normalize_namespaces(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, int):
            return (int(value),)
        return tuple(int(ns) for ns in value)  # type: ignore[union-attr]

    @property
    def namespace_param(self) -> str | None:
        """The ``|``-joined namespace list, or None when unrestricted."""
        if not self.namespaces:
            return None
        return "|".join(str(ns) for ns in self.namespaces)
