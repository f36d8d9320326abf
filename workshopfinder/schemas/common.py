"""공통 Pydantic 스키마 정의.

Common Pydantic schema definitions shared by every API domain.
JSON bodies use camelCase keys (``serviceType``, ``createdAt``); records
are identified by ``id``. snake_case field names are accepted on input as well.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 직렬화 베이스 스키마.

    Base schema serializing field names as camelCase aliases.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """단순 메시지 응답 스키마 (Generic message response)."""

    message: str
