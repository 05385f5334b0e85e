#!/usr/bin/env python3
"""
Advanced speech-to-text example.

Demonstrates diarization, word timestamps, strict local validation and
error handling with a caller-side retry on rate limiting.

Usage:
    export ELEVENLABS_API_KEY="your-api-key"
    python examples/advanced_stt.py inputs/speech.mp3
"""

import asyncio
import sys
from pathlib import Path

from elevenlabs_stt import ElevenLabsSttClient, RateLimitError, SttError, models
from elevenlabs_stt.telemetry import LogLevel, SttLogger


async def main(path: str) -> None:
    """Transcribe with speaker labels and print per-word timing."""
    SttLogger.configure(level=LogLevel.DEBUG, format="text")
    audio = Path(path).read_bytes()

    async with ElevenLabsSttClient(strict=True) as client:
        request = (
            client.speech_to_text(audio, file_name=Path(path).name)
            .model(models.SCRIBE_V1)
            .language_code("en")
            .tag_audio_events(True)
            .timestamps_granularity("word")
            .diarize(True)
            .diarization_threshold(0.22)
            .temperature(0.2)
            .seed(4000)
        )

        for attempt in range(3):
            try:
                response = await request.execute()
                break
            except RateLimitError as e:
                delay = e.retry_after or 2**attempt
                print(f"Rate limited, retrying in {delay}s")
                await asyncio.sleep(delay)
            except SttError as e:
                print(f"Transcription failed: {e}")
                return
        else:
            print("Giving up after 3 attempts")
            return

    print(f"Transcription: {response.text}")
    for word in response.words or []:
        if word.word_type == "word":
            print(f"[{word.start:6.2f} - {word.end:6.2f}] {word.speaker_id}: {word.text}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "inputs/speech.mp3"))
