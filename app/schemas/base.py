from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response models serialized with camelCase keys, as the site frontend reads them."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
