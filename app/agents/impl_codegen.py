"""
Code generation agents - C# class model, TypeScript module and file output.
"""
import logging
from app.agents.base import BaseAgent, AgentResult
from app.core.workflow import GenerationStage
from app.generators.xrm_gen.generator import render_csharp, write_files
from app.generators.xrm_gen.render import load_template, render_typescript_module
from app.generators.xrm_gen.types import GeneratedFile

log = logging.getLogger(__name__)


class ClassModelAgent(BaseAgent):
    stage = GenerationStage.BUILD_CLASS_MODEL

    def run(self, run):
        try:
            run.csharp = render_csharp(run.entities, namespace=run.namespace)
            return AgentResult(
                self.stage,
                True,
                f"Built class model for {len(run.entities)} entities",
                {"namespace": run.namespace}
            )
        except Exception as e:
            log.exception("Failed to build class model: %s", e,
                          extra={"run_id": run.run_id, "stage": self.stage.value})
            return AgentResult(self.stage, False, f"Failed to build class model: {e}", {})


class TypeScriptModuleAgent(BaseAgent):
    stage = GenerationStage.RENDER_TYPESCRIPT

    def run(self, run):
        try:
            template = load_template(run.template_path)
            run.typescript = render_typescript_module(
                run.entities, template, run.placeholder_token
            )
            return AgentResult(
                self.stage,
                True,
                f"Rendered TypeScript module for {len(run.entities)} entities",
                {"template": str(run.template_path) if run.template_path else "default"}
            )
        except Exception as e:
            log.exception("Failed to render TypeScript module: %s", e,
                          extra={"run_id": run.run_id, "stage": self.stage.value})
            return AgentResult(self.stage, False, f"Failed to render TypeScript module: {e}", {})


class OutputWriterAgent(BaseAgent):
    stage = GenerationStage.WRITE_OUTPUT

    def run(self, run):
        try:
            files = [
                GeneratedFile(path=run.csharp_file, content=run.csharp or ""),
                GeneratedFile(path=run.typescript_file, content=run.typescript or ""),
            ]
            write_files(files, run.out_dir)

            generated = [str(run.out_dir / f.path) for f in files]
            log.info("Wrote %d files to %s", len(files), run.out_dir,
                     extra={"run_id": run.run_id, "stage": self.stage.value})
            return AgentResult(
                self.stage,
                True,
                f"Wrote {len(files)} files",
                {"generated_files": generated}
            )
        except Exception as e:
            log.exception("Failed to write output: %s", e,
                          extra={"run_id": run.run_id, "stage": self.stage.value})
            return AgentResult(self.stage, False, f"Failed to write output: {e}", {})
