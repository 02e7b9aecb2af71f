"""
MetadataLoaderAgent - Loads entity metadata and applies the user's selection.
"""
import logging
from app.agents.base import BaseAgent, AgentResult
from app.core.workflow import GenerationStage
from app.metadata.loader import MetadataError, load_entities, select_entities

log = logging.getLogger(__name__)


class MetadataLoaderAgent(BaseAgent):
    stage = GenerationStage.LOAD_METADATA

    def run(self, run):
        extra = {"run_id": run.run_id, "stage": self.stage.value}
        try:
            if not run.metadata_path.exists():
                return AgentResult(
                    self.stage,
                    False,
                    f"Metadata file not found: {run.metadata_path}",
                    {}
                )

            entities = load_entities(run.metadata_path)
            run.entities = select_entities(entities, run.selected)

            log.info("Selected %d of %d entities", len(run.entities), len(entities), extra=extra)

            return AgentResult(
                self.stage,
                True,
                f"Loaded {len(run.entities)} entities",
                {"entities": [e.logical_name for e in run.entities]}
            )

        except MetadataError as e:
            log.error("Invalid metadata: %s", e, extra=extra)
            return AgentResult(self.stage, False, f"Invalid metadata: {e}", {})
        except Exception as e:
            log.exception("Failed to load metadata: %s", e, extra=extra)
            return AgentResult(self.stage, False, f"Failed to load metadata: {e}", {})
