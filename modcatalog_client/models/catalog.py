"""Catalog entity types.

Field names follow the upstream JSON (camelCase). Every field is optional:
the upstream omits fields freely and consumers must tolerate their absence.
Unknown fields are kept.
"""

from enum import IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field


class SortField(IntEnum):
    """Sort fields accepted by the mod search endpoint."""

    FEATURED = 1
    POPULARITY = 2
    LAST_UPDATED = 3
    NAME = 4
    AUTHOR = 5
    TOTAL_DOWNLOADS = 6
    CATEGORY = 7
    GAME_VERSION = 8
    EARLY_ACCESS = 9
    FEATURED_RELEASED = 10
    RELEASED_DATE = 11
    RATING = 12

    @property
    def label(self) -> str:
        """Human readable label, e.g. 'Last Updated'."""
        return self.name.replace("_", " ").title()


class CatalogEntity(BaseModel):
    """Base for upstream records."""

    class Config:
        extra = "allow"
        populate_by_name = True


class GameAssets(CatalogEntity):
    iconUrl: Optional[str] = None
    tileUrl: Optional[str] = None
    coverUrl: Optional[str] = None


class Game(CatalogEntity):
    """A game supported by the catalog."""

    id: Optional[int] = Field(default=None, description="Game ID")
    name: Optional[str] = Field(default=None, description="Game name")
    slug: Optional[str] = Field(default=None, description="URL slug")
    dateModified: Optional[str] = Field(default=None, description="Last change (ISO 8601)")
    assets: Optional[GameAssets] = None
    status: Optional[int] = None
    apiStatus: Optional[int] = None

    @property
    def image_url(self) -> Optional[str]:
        """First available artwork: icon, then tile, then cover."""
        if not self.assets:
            return None
        return self.assets.iconUrl or self.assets.tileUrl or self.assets.coverUrl


class ModLinks(CatalogEntity):
    websiteUrl: Optional[str] = None
    wikiUrl: Optional[str] = None
    issuesUrl: Optional[str] = None
    sourceUrl: Optional[str] = None


class ModCategory(CatalogEntity):
    id: Optional[int] = None
    gameId: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    iconUrl: Optional[str] = None
    dateModified: Optional[str] = None
    isClass: Optional[bool] = None
    classId: Optional[int] = None
    parentCategoryId: Optional[int] = None
    displayIndex: Optional[int] = None


class ModAuthor(CatalogEntity):
    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None


class ModAsset(CatalogEntity):
    """Logo or screenshot of a mod."""

    id: Optional[int] = None
    modId: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnailUrl: Optional[str] = None
    url: Optional[str] = None


class FileHash(CatalogEntity):
    value: Optional[str] = None
    algo: Optional[int] = None


class SortableGameVersion(CatalogEntity):
    gameVersionName: Optional[str] = None
    gameVersionPadded: Optional[str] = None
    gameVersion: Optional[str] = None
    gameVersionReleaseDate: Optional[str] = None
    gameVersionTypeId: Optional[int] = None


class FileDependency(CatalogEntity):
    modId: Optional[int] = None
    relationType: Optional[int] = None


class FileModule(CatalogEntity):
    name: Optional[str] = None
    fingerprint: Optional[int] = None


class ModFile(CatalogEntity):
    """A downloadable file of a mod."""

    id: Optional[int] = None
    gameId: Optional[int] = None
    modId: Optional[int] = None
    isAvailable: Optional[bool] = None
    displayName: Optional[str] = None
    fileName: Optional[str] = None
    releaseType: Optional[int] = None
    fileStatus: Optional[int] = None
    hashes: Optional[List[FileHash]] = None
    fileDate: Optional[str] = None
    fileLength: Optional[int] = None
    downloadCount: Optional[int] = None
    fileSizeOnDisk: Optional[int] = None
    downloadUrl: Optional[str] = None
    gameVersions: Optional[List[str]] = None
    sortableGameVersions: Optional[List[SortableGameVersion]] = None
    dependencies: Optional[List[FileDependency]] = None
    exposeAsAlternative: Optional[bool] = None
    parentProjectFileId: Optional[int] = None
    alternateFileId: Optional[int] = None
    isServerPack: Optional[bool] = None
    serverPackFileId: Optional[int] = None
    isEarlyAccessContent: Optional[bool] = None
    earlyAccessEndDate: Optional[str] = None
    fileFingerprint: Optional[int] = None
    modules: Optional[List[FileModule]] = None


class FileIndex(CatalogEntity):
    gameVersion: Optional[str] = None
    fileId: Optional[int] = None
    filename: Optional[str] = None
    releaseType: Optional[int] = None
    gameVersionTypeId: Optional[int] = None
    modLoader: Optional[int] = None


class Mod(CatalogEntity):
    """A mod, as returned by search, featured and detail endpoints."""

    id: Optional[int] = Field(default=None, description="Mod ID")
    gameId: Optional[int] = Field(default=None, description="Owning game ID")
    name: Optional[str] = Field(default=None, description="Mod name")
    slug: Optional[str] = Field(default=None, description="URL slug")
    links: Optional[ModLinks] = None
    summary: Optional[str] = None
    status: Optional[int] = None
    downloadCount: Optional[int] = None
    isFeatured: Optional[bool] = None
    primaryCategoryId: Optional[int] = None
    categories: Optional[List[ModCategory]] = None
    classId: Optional[int] = None
    authors: Optional[List[ModAuthor]] = None
    logo: Optional[ModAsset] = None
    screenshots: Optional[List[ModAsset]] = None
    mainFileId: Optional[int] = None
    latestFiles: Optional[List[ModFile]] = None
    latestFilesIndexes: Optional[List[FileIndex]] = None
    latestEarlyAccessFilesIndexes: Optional[List[FileIndex]] = None
    dateCreated: Optional[str] = None
    dateModified: Optional[str] = None
    dateReleased: Optional[str] = None
    allowModDistribution: Optional[bool] = None
    gamePopularityRank: Optional[int] = None
    isAvailable: Optional[bool] = None
    thumbsUpCount: Optional[int] = None
    rating: Optional[float] = None


class FeaturedMods(CatalogEntity):
    """Payload of the featured mods endpoint."""

    featured: Optional[List[Mod]] = None
    popular: Optional[List[Mod]] = None
    recentlyUpdated: Optional[List[Mod]] = None


class GameVersionGroup(CatalogEntity):
    """Versions of one version type (e.g. one Minecraft edition)."""

    type: Optional[int] = None
    versions: Optional[List[str]] = None


class GameVersionType(CatalogEntity):
    id: Optional[int] = None
    gameId: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    isSyncable: Optional[bool] = None
    status: Optional[int] = None
