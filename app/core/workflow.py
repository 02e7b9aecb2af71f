from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

class GenerationStage(str, Enum):
    LOAD_METADATA = "LOAD_METADATA"
    BUILD_CLASS_MODEL = "BUILD_CLASS_MODEL"
    RENDER_TYPESCRIPT = "RENDER_TYPESCRIPT"
    WRITE_OUTPUT = "WRITE_OUTPUT"
    DONE = "DONE"
    FAILED = "FAILED"

@dataclass
class GenerationRun:
    """State of one generation run, filled in stage by stage."""
    run_id: str
    metadata_path: Path
    out_dir: Path
    selected: List[str] = field(default_factory=list)
    template_path: Optional[Path] = None
    placeholder_token: str = "{#rendered_content#}"
    namespace: str = "Xrm"
    typescript_file: str = "Xrm.ts"
    csharp_file: str = "Xrm.cs"

    stage: GenerationStage = GenerationStage.LOAD_METADATA
    entities: List[Any] = field(default_factory=list)
    csharp: Optional[str] = None
    typescript: Optional[str] = None
    artifacts: Dict[str, Any] = field(default_factory=dict)
    error_message: Optional[str] = None
