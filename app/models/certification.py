from pydantic import BaseModel, ConfigDict


class Certification(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    short_name: str
    description: str
    for_who: str
