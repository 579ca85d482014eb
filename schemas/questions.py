# schemas/questions.py
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict

TrigFunction = Literal["sin", "cos", "tan"]
Angle = Literal[30, 45, 60]


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    func: TrigFunction
    angle: Angle

    @property
    def key(self) -> str:
        return f"{self.func}-{self.angle}"

    @property
    def prompt(self) -> str:
        return f"{self.func}({self.angle}°)"


class QuestionOut(BaseModel):
    key: str
    func: TrigFunction
    angle: Angle
    prompt: str
    canonical: str
    accepted: List[str]
    approx: float


class ChoiceOut(BaseModel):
    value: str
    label: str
