"""Quiz Answers - Variante tipada de resposta (single | multiple)."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import QuestionType


class SingleAnswer(BaseModel):
    """Resposta de escolha unica (uma chave de alternativa)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    key: str

    @property
    def is_empty(self) -> bool:
        return not self.key

    def to_raw(self) -> str:
        return self.key


class MultipleAnswer(BaseModel):
    """Resposta de multipla escolha.

    Mantem as chaves na ordem recebida e descarta repeticoes, de modo que
    tamanho igual + contencao equivale a igualdade de conjuntos.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["multiple"] = "multiple"
    keys: tuple[str, ...] = ()

    @field_validator("keys", mode="after")
    @classmethod
    def _dedupe(cls, keys: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(keys))

    @property
    def is_empty(self) -> bool:
        return not self.keys

    def to_raw(self) -> list[str]:
        return list(self.keys)


Answer = Annotated[Union[SingleAnswer, MultipleAnswer], Field(discriminator="kind")]


def make_answer(question_type: QuestionType, value: str | list[str] | tuple[str, ...]) -> Answer:
    """Constroi a variante correta a partir do valor bruto.

    Raises:
        TypeError: Se o formato do valor nao corresponde ao tipo da questao
    """
    if question_type == QuestionType.MULTIPLE:
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise TypeError("Questao de multipla escolha espera uma lista de chaves")
        if not all(isinstance(key, str) for key in value):
            raise TypeError("Chaves de alternativa devem ser strings")
        return MultipleAnswer(keys=tuple(value))

    if not isinstance(value, str):
        raise TypeError("Questao de escolha unica espera uma chave")
    return SingleAnswer(key=value)
