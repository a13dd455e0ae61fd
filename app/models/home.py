from typing import List

from pydantic import BaseModel, ConfigDict


class HeroSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    button_text: str


class AboutSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str  # rendered HTML


class WhyUsItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str


class WhyUsSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    items: List[WhyUsItem]


class HomePageData(BaseModel):
    """Home page composite assembled from the ``home`` page's custom fields."""

    model_config = ConfigDict(frozen=True)

    hero: HeroSection
    about: AboutSection
    why_us: WhyUsSection
