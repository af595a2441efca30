"""Quiz Schemas - Modelos Pydantic do dominio e da API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .answers import Answer, make_answer
from .enums import QuestionType, SessionStatus


class Question(BaseModel):
    """Questao com alternativas rotuladas e gabarito."""

    id: int | str = Field(..., description="ID da questao, unico dentro do quiz")
    text: str = Field(..., description="Enunciado da questao")
    type: QuestionType = Field(..., description="single ou multiple")
    options: dict[str, str] = Field(..., min_length=1, description="Chave -> texto da alternativa")
    answer: str | list[str] = Field(
        ..., description="Chave correta (single) ou lista de chaves corretas (multiple)"
    )

    @model_validator(mode="after")
    def _check_answer(self) -> "Question":
        if self.type == QuestionType.SINGLE:
            if not isinstance(self.answer, str):
                raise ValueError("questao 'single' exige answer do tipo string")
            keys = [self.answer]
        else:
            if not isinstance(self.answer, list) or not self.answer:
                raise ValueError("questao 'multiple' exige answer como lista nao vazia")
            if len(set(self.answer)) != len(self.answer):
                raise ValueError("answer contem chaves repetidas")
            keys = self.answer

        missing = [key for key in keys if key not in self.options]
        if missing:
            raise ValueError(f"answer referencia alternativas inexistentes: {missing}")
        return self

    @property
    def is_multiple(self) -> bool:
        return self.type == QuestionType.MULTIPLE

    @property
    def answer_key(self) -> Answer:
        """Gabarito como variante tipada."""
        return make_answer(self.type, self.answer)


class Quiz(BaseModel):
    """Quiz importado: titulo, descricao e questoes ordenadas."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="ID unico (timestamp em ms)")
    title: str = Field(..., min_length=1, description="Titulo do quiz")
    description: str = Field(default="", description="Descricao opcional")
    questions: list[Question] = Field(..., min_length=1, description="Questoes em ordem")
    created_at: datetime = Field(..., alias="createdAt", description="Data de criacao")

    @field_validator("questions")
    @classmethod
    def _unique_question_ids(cls, questions: list[Question]) -> list[Question]:
        seen: set[str] = set()
        for question in questions:
            qid = str(question.id)
            if qid in seen:
                raise ValueError(f"ID de questao repetido: {question.id}")
            seen.add(qid)
        return questions

    def get_question(self, question_id: int | str) -> Question | None:
        """Busca questao pelo ID (comparacao pela forma textual)."""
        for question in self.questions:
            if str(question.id) == str(question_id):
                return question
        return None


class Attempt(BaseModel):
    """Registro persistido de uma tentativa concluida."""

    model_config = ConfigDict(populate_by_name=True)

    test_id: int = Field(..., alias="testId", description="ID do quiz")
    test_title: str = Field(..., alias="testTitle", description="Titulo no momento da tentativa")
    date: datetime = Field(..., description="Data da submissao")
    score: int = Field(..., ge=0, description="Respostas corretas")
    total: int = Field(..., gt=0, description="Total de questoes")
    percentage: float = Field(..., ge=0, le=100, description="Aproveitamento (1 casa decimal)")

    @model_validator(mode="after")
    def _score_within_total(self) -> "Attempt":
        if self.score > self.total:
            raise ValueError("score nao pode exceder total")
        return self

    def is_passing(self, threshold: float) -> bool:
        return self.percentage >= threshold


class GradedResponse(BaseModel):
    """Resultado da correcao de uma questao."""

    model_config = ConfigDict(populate_by_name=True)

    question_id: int | str = Field(..., alias="questionId")
    user_answer: Answer | None = Field(default=None, alias="userAnswer")
    is_correct: bool = Field(..., alias="isCorrect")


class SubmissionResult(BaseModel):
    """Tentativa registrada e correcao questao a questao."""

    attempt: Attempt
    responses: list[GradedResponse]

    @property
    def mistakes(self) -> list[GradedResponse]:
        return [r for r in self.responses if not r.is_correct]


class AttemptRecord(BaseModel):
    """Linha do historico de tentativas."""

    date: datetime
    score: int
    total: int
    percentage: float
    passed: bool


class QuizSummary(BaseModel):
    """Estatisticas agregadas de um quiz."""

    quiz_id: int
    quiz_title: str
    attempt_count: int
    average_percentage: float
    best_percentage: float
    history: list[AttemptRecord]


class MistakeReview(BaseModel):
    """Questao errada com resposta dada e gabarito formatados."""

    question_id: int | str
    question_text: str
    user_answer: str
    correct_answer: str


# =============================================================================
# API SCHEMAS
# =============================================================================


class ImportQuizRequest(BaseModel):
    """Request para importar quiz a partir de texto JSON."""

    json_text: str = Field(..., description="Documento JSON do quiz")


class QuizListItem(BaseModel):
    """Resumo de um quiz para listagem."""

    id: int
    title: str
    description: str
    question_count: int
    created_at: datetime
    average_percentage: float | None = Field(
        None, description="Media das tentativas (None se nunca respondido)"
    )


class RecordAnswerRequest(BaseModel):
    """Request para registrar a resposta de uma questao."""

    question_id: int | str = Field(..., description="ID da questao")
    value: str | list[str] = Field(
        ..., description="Chave escolhida (single) ou conjunto completo (multiple)"
    )


class SessionStatusResponse(BaseModel):
    """Estado atual da sessao de quiz."""

    status: SessionStatus
    quiz_id: int | None = None
    quiz_title: str | None = None
    answered_count: int = 0
    total_questions: int = 0
    complete: bool = False


class SubmitResponse(BaseModel):
    """Response da submissao com revisao dos erros."""

    attempt: Attempt
    responses: list[GradedResponse]
    mistakes: list[MistakeReview]
    passed: bool
