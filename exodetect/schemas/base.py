from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FrozenRecord(BaseModel):
    """Immutable value object exchanged as camelCase JSON"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
        frozen=True
    )
