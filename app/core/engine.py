from __future__ import annotations
import logging
from app.core.workflow import GenerationRun, GenerationStage
from app.agents.registry import AgentRegistry

log = logging.getLogger(__name__)

class GenerationEngine:
    def __init__(self, run: GenerationRun, registry: AgentRegistry | None = None):
        self.run_state = run
        self.registry = registry or AgentRegistry.default()

    def _merge_artifacts(self, updates: dict) -> None:
        self.run_state.artifacts.update(updates)

    def run(self) -> GenerationRun:
        stages = [
            GenerationStage.LOAD_METADATA,
            GenerationStage.BUILD_CLASS_MODEL,
            GenerationStage.RENDER_TYPESCRIPT,
            GenerationStage.WRITE_OUTPUT,
        ]
        run = self.run_state

        for stage in stages:
            run.stage = stage
            log.info("Running stage", extra={"run_id": run.run_id, "stage": stage.value})

            agent = self.registry.get(stage)
            result = agent.run(run)

            self._merge_artifacts(result.artifacts_index)

            if not result.ok:
                log.error("Stage failed: %s", result.message,
                          extra={"run_id": run.run_id, "stage": stage.value})
                run.error_message = result.message
                run.stage = GenerationStage.FAILED
                raise RuntimeError(result.message)

        run.stage = GenerationStage.DONE
        log.info("Generation complete", extra={"run_id": run.run_id, "stage": run.stage.value})
        return run
