from dataclasses import dataclass
from typing import Dict, Any
from app.core.workflow import GenerationRun, GenerationStage

@dataclass
class AgentResult:
    stage: GenerationStage
    ok: bool
    message: str
    artifacts_index: Dict[str, Any]

class BaseAgent:
    stage: GenerationStage
    def run(self, run: GenerationRun) -> AgentResult:
        raise NotImplementedError
