from app.models.collection import PromptCollection
from app.models.template import PromptTemplate
from app.models.variable import PromptVariable

__all__ = ["PromptCollection", "PromptTemplate", "PromptVariable"]
