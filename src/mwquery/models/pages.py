from pydantic import field_validator

from mwquery.models.base import MWModel


class PageRef(MWModel):
    title: str
    ns: int = 0
    pageid: int | None = None
    redirect: bool = False

    @field_validator("redirect", mode="before")
    @classmethod
    def _flag_present(cls, value: object) -> object:
        # Legacy JSON marks flags with an empty string.
        if value == "":
            return True
        return value


class CategoryItem(MWModel):
    title: str
    ns: int = 0
    pageid: int | None = None
    sortkey: str | None = None
    timestamp: str | None = None


class RecentChange(MWModel):
    title: str
    type: str = "edit"
    ns: int = 0
    pageid: int | None = None
    revid: int | None = None
    old_revid: int | None = None
    rcid: int | None = None
    timestamp: str | None = None
