"""
Alert description - what a presenter hands to the rendering sink.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SMALL_ICON = "ic_kickstarter_k"
DEFAULT_COLOR = "#2BDE73"


class ImageMask(str, Enum):
    SQUARE = "square"
    CIRCLE = "circle"


class Screen(str, Enum):
    PROJECT = "project"
    WEB_VIEW = "web_view"


class ImageRequest(BaseModel):
    """Large icon to fetch; masks are applied in order."""
    model_config = ConfigDict(frozen=True)

    url: str
    masks: tuple[ImageMask, ...] = (ImageMask.SQUARE,)


class Bitmap(BaseModel):
    """Downloaded image bytes plus the transforms the renderer must still apply."""
    model_config = ConfigDict(frozen=True)

    url: str
    data: bytes
    content_type: Optional[str] = None
    transforms: tuple[ImageMask, ...] = ()


class NavigationHop(BaseModel):
    model_config = ConfigDict(frozen=True)

    screen: Screen
    params: dict[str, Any] = Field(default_factory=dict)


class TapTarget(BaseModel):
    """Ordered navigation plan. hops[0] is the back-stack root."""
    model_config = ConfigDict(frozen=True)

    hops: tuple[NavigationHop, ...]
    request_code: int
    update_current: bool = True

    @property
    def destination(self) -> NavigationHop:
        return self.hops[-1]


class AlertDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    big_text: Optional[str] = None
    small_icon: str = DEFAULT_SMALL_ICON
    color: str = DEFAULT_COLOR
    auto_cancel: bool = True
    large_image: Optional[ImageRequest] = None
    tap_target: Optional[TapTarget] = None
    large_icon: Optional[Bitmap] = None
