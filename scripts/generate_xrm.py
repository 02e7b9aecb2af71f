#!/usr/bin/env python3
"""
Generate Xrm.cs and Xrm.ts from a CRM entity metadata export.
Usage: python scripts/generate_xrm.py METADATA [--entity NAME ...] [--out DIR] [--template PATH]
"""
import sys
import uuid
import argparse
from pathlib import Path

from app.core.config import settings
from app.core.engine import GenerationEngine
from app.core.logging import configure_logging
from app.core.workflow import GenerationRun


def main():
    parser = argparse.ArgumentParser(description="Generate C# and TypeScript classes from CRM entity metadata")
    parser.add_argument("metadata", help="Entity metadata file (.json, .yaml or .yml)")
    parser.add_argument("--entity", "-e", action="append", default=[], dest="entities",
                        help="Logical name of an entity to generate (repeatable, in selection order)")
    parser.add_argument("--out", "-o", default=settings.output_dir, help="Output directory")
    parser.add_argument("--template", default=settings.template_path, help="TypeScript module template")
    parser.add_argument("--namespace", default=settings.namespace, help="Namespace of the generated C# classes")
    args = parser.parse_args()

    configure_logging()

    run = GenerationRun(
        run_id=uuid.uuid4().hex[:8],
        metadata_path=Path(args.metadata),
        out_dir=Path(args.out),
        selected=args.entities,
        template_path=Path(args.template) if args.template else None,
        placeholder_token=settings.placeholder_token,
        namespace=args.namespace,
        typescript_file=settings.typescript_file,
        csharp_file=settings.csharp_file,
    )

    try:
        GenerationEngine(run).run()
    except RuntimeError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print(f"Generated {len(run.entities)} entities:")
    for path in run.artifacts.get("generated_files", []):
        print(f"  {path}")


if __name__ == "__main__":
    main()
