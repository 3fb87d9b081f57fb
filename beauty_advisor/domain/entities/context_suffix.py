from dataclasses import dataclass


@dataclass(frozen=True)
class ContextSuffix:
    selection_text: str
    routine_text: str = ""

    def render(self) -> str:
        return f"{self.selection_text}{self.routine_text}"
