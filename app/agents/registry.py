from dataclasses import dataclass
from typing import Dict
from app.core.workflow import GenerationStage
from app.agents.base import BaseAgent
from app.agents.impl_metadata import MetadataLoaderAgent
from app.agents.impl_codegen import ClassModelAgent, TypeScriptModuleAgent, OutputWriterAgent

@dataclass
class AgentRegistry:
    mapping: Dict[GenerationStage, BaseAgent]

    def get(self, stage: GenerationStage) -> BaseAgent:
        return self.mapping[stage]

    @staticmethod
    def default() -> "AgentRegistry":
        return AgentRegistry(mapping={
            GenerationStage.LOAD_METADATA: MetadataLoaderAgent(),
            GenerationStage.BUILD_CLASS_MODEL: ClassModelAgent(),
            GenerationStage.RENDER_TYPESCRIPT: TypeScriptModuleAgent(),
            GenerationStage.WRITE_OUTPUT: OutputWriterAgent(),
        })
