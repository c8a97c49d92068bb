"""Entry point for summarising a streaming history export"""
import json
import logging
import os
import sys
import traceback

from streaming_summary.charts import build_frequency_chart, build_pie_chart, render_text_report
from streaming_summary.config import settings
from streaming_summary.exceptions import MalformedInput
from streaming_summary.services.loader import load_history
from streaming_summary.summary import ListeningSummary

logging.basicConfig(level=settings.LOG_LEVEL, format='%(message)s')
logger = logging.getLogger(__name__)

def run() -> None:
    """Summarise the export found in INPUT_DIR."""
    try:
        logger.info("Using configuration:")
        logger.info(json.dumps(settings.model_dump(), indent=2))

        records = load_history(settings.INPUT_DIR, settings.HISTORY_FILE_PATTERN)
        response = ListeningSummary(settings).generate(records)

        # Save results
        os.makedirs(settings.OUTPUT_DIR, exist_ok=True)
        output_path = os.path.join(settings.OUTPUT_DIR, "results.json")
        results = response.model_dump()
        results['pie_chart'] = build_pie_chart(response.chart)
        results['frequency_chart'] = build_frequency_chart(response.artist_frequency)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, ensure_ascii=False)

        print(render_text_report(response))
        logger.info(f"Summary written to {output_path}")

    except MalformedInput as e:
        logger.error(f"Please upload a valid Spotify JSON file: {e.message}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error during summary generation: {e}")
        traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    run()
