from typing import Literal, Optional

from pydantic import BaseModel, Field

from .utils import get_random_source


class GeneratorConfig(BaseModel):
    context_length: int = Field(3, ge=1)
    word_count: int = Field(15, ge=0)
    seed: Optional[int] = None
    backend: Literal["python", "torch"] = "python"
    max_length: Optional[int] = Field(None, ge=1)

    def random_source(self):
        return get_random_source(self.backend, self.seed)
