"""Summarize a local recording, optionally translate it, then toggle back.

Usage: python scripts/summarize_file.py path/to/audio.mp3 [target-language] [model]
"""

import asyncio
import mimetypes
import os
import sys
from pathlib import Path

# Add project root to path so we can import app
sys.path.append(os.getcwd())

from app.pipelines.summary import SummaryOrchestrator, SummaryPipelineError
from app.services.gemini_client import get_gemini_client
from app.services.rules import load_default_rules


def _print_view(title, view):
    print(f"\n--- {title} ---")
    print("Transcript:\n" + view.transcript)
    print("\nSummary:\n" + view.summary)
    print("-" * (len(title) + 8))


async def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/summarize_file.py path/to/audio.mp3 [target-language] [model]")
        return 1

    file_path = Path(sys.argv[1])
    target_language = sys.argv[2] if len(sys.argv) > 2 else None
    model_id = sys.argv[3] if len(sys.argv) > 3 else None

    if not file_path.exists():
        print(f"File '{file_path}' not found.")
        return 1

    content_type, _ = mimetypes.guess_type(file_path.name)
    orchestrator = SummaryOrchestrator(get_gemini_client())

    print(f"Summarizing {file_path} ({file_path.stat().st_size} bytes)...")
    try:
        result = await orchestrator.summarize(
            file_path.read_bytes(),
            content_type=content_type,
            filename=file_path.name,
            rules=load_default_rules(),
            model_id=model_id,
        )
        _print_view(f"Original ({result.language})", result)

        if target_language:
            translated = await orchestrator.translate(target_language, model_id)
            _print_view(target_language, translated)
            restored = await orchestrator.translate("original")
            print(f"\nRestored original unchanged: {restored == result}")
    except SummaryPipelineError as e:
        print(f"\n{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
