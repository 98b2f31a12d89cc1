from pydantic import BaseModel

from handyhub.common.enums import ErrorCategory


class ExternalError(BaseModel):
    category: ErrorCategory
    message: str
