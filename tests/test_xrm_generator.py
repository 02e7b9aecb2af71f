"""Tests for end-to-end generation: orchestrator and workflow engine."""
import shutil
import tempfile
from pathlib import Path

import pytest

from app.agents.base import AgentResult
from app.agents.registry import AgentRegistry
from app.core.engine import GenerationEngine
from app.core.workflow import GenerationRun, GenerationStage
from app.generators.xrm_gen.generator import generate_xrm
from app.metadata.loader import load_entities

EXAMPLE_METADATA = Path(__file__).parent.parent / "examples" / "entity-metadata.json"


def test_generate_xrm_writes_both_files():
    entities = load_entities(EXAMPLE_METADATA)

    with tempfile.TemporaryDirectory() as temp_dir:
        out_dir = Path(temp_dir) / "generated"
        files = generate_xrm(entities, out_dir, template="module X {\n{#rendered_content#}}\n")

        assert [f.path for f in files] == ["Xrm.cs", "Xrm.ts"]
        for file in files:
            full_path = out_dir / file.path
            assert full_path.exists(), f"File {file.path} was not created"
            assert full_path.read_text(encoding="utf-8") == file.content

        csharp = (out_dir / "Xrm.cs").read_text(encoding="utf-8")
        assert "public class Account" in csharp
        assert "public class Contact" in csharp
        assert 'public const string route = "contacts";' in csharp

        typescript = (out_dir / "Xrm.ts").read_text(encoding="utf-8")
        assert typescript.startswith("module X {\n//** @description AUTO GENERATED CLASSES FOR Account")
        assert "_parentaccountid_value" in typescript
        assert typescript.endswith("}\n")


def test_generate_xrm_overwrites_existing_output():
    entities = load_entities(EXAMPLE_METADATA)

    with tempfile.TemporaryDirectory() as temp_dir:
        out_dir = Path(temp_dir)
        (out_dir / "Xrm.cs").write_text("stale", encoding="utf-8")

        generate_xrm(entities[:1], out_dir, namespace="Crm")

        csharp = (out_dir / "Xrm.cs").read_text(encoding="utf-8")
        assert "stale" not in csharp
        assert "namespace Crm" in csharp
        assert "{#rendered_content#}" not in (out_dir / "Xrm.ts").read_text(encoding="utf-8")


def test_engine_runs_all_stages():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        metadata_path = temp_path / "metadata.json"
        shutil.copy(EXAMPLE_METADATA, metadata_path)

        run = GenerationRun(
            run_id="test-run",
            metadata_path=metadata_path,
            out_dir=temp_path / "out",
            selected=["contact"],
        )
        GenerationEngine(run).run()

        assert run.stage == GenerationStage.DONE
        assert [e.logical_name for e in run.entities] == ["contact"]
        assert run.artifacts["entities"] == ["contact"]
        assert len(run.artifacts["generated_files"]) == 2

        typescript = (temp_path / "out" / "Xrm.ts").read_text(encoding="utf-8")
        assert "export class Contact extends Entity {" in typescript
        assert "export class Account extends Entity {" not in typescript


def test_engine_fails_on_missing_metadata():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        run = GenerationRun(
            run_id="test-run",
            metadata_path=temp_path / "missing.json",
            out_dir=temp_path / "out",
        )

        with pytest.raises(RuntimeError, match="Metadata file not found"):
            GenerationEngine(run).run()

        assert run.stage == GenerationStage.FAILED
        assert not (temp_path / "out").exists()


def test_engine_fails_on_unknown_selection():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        run = GenerationRun(
            run_id="test-run",
            metadata_path=EXAMPLE_METADATA,
            out_dir=temp_path / "out",
            selected=["lead"],
        )

        with pytest.raises(RuntimeError, match="Unknown entities selected: lead"):
            GenerationEngine(run).run()
        assert "lead" in run.error_message


def test_engine_stops_at_first_failing_stage():
    class FailingAgent:
        stage = GenerationStage.BUILD_CLASS_MODEL

        def run(self, run):
            return AgentResult(self.stage, False, "boom", {"partial": True})

    registry = AgentRegistry.default()
    registry.mapping[GenerationStage.BUILD_CLASS_MODEL] = FailingAgent()

    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        run = GenerationRun(
            run_id="test-run",
            metadata_path=EXAMPLE_METADATA,
            out_dir=temp_path / "out",
        )

        with pytest.raises(RuntimeError, match="boom"):
            GenerationEngine(run, registry=registry).run()

        assert run.artifacts["partial"] is True
        assert run.typescript is None
        assert not (temp_path / "out").exists()
