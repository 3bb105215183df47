import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Dict, Any

CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'


class LogManager:
    """Console and file logging for a crawl run

    Everything goes to crawler_<date>.log, warnings and errors also to
    errors_<date>.log. Per-page extraction timings are written as JSON
    lines to performance_<date>.log and kept off the console.
    """

    def __init__(self, log_dir: str = "wikigraph_data/logs", log_level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.date_suffix = datetime.now().strftime('%Y%m%d')

        self.setup_logging(log_level)

    def _file_handler(self, prefix: str, level: int, formatter: logging.Formatter = None) -> logging.FileHandler:
        handler = logging.FileHandler(self.log_dir / f"{prefix}_{self.date_suffix}.log", encoding='utf-8')
        handler.setLevel(level)
        if formatter:
            handler.setFormatter(formatter)
        return handler

    def setup_logging(self, log_level: str):
        level = getattr(logging, log_level.upper())
        detailed = logging.Formatter(FILE_FORMAT)

        root_logger = logging.getLogger()
        root_logger.setLevel(min(level, logging.DEBUG))
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

        root_logger.addHandler(self._file_handler("crawler", logging.DEBUG, detailed))
        root_logger.addHandler(self._file_handler("errors", logging.WARNING, detailed))

        # aiohttp is chatty at debug level
        logging.getLogger('aiohttp').setLevel(logging.WARNING)

        self.perf_logger = logging.getLogger('performance')
        self.perf_logger.setLevel(logging.INFO)
        self.perf_logger.handlers.clear()
        self.perf_logger.addHandler(self._file_handler("performance", logging.INFO))
        self.perf_logger.propagate = False

    def log_performance_event(self, event_type: str, **kwargs):
        event_data = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            **kwargs
        }
        self.perf_logger.info(json.dumps(event_data))

    def export_metrics_json(self, metrics_data: Dict[str, Any], filename: str = None) -> Path:
        """Write a metrics snapshot next to the logs"""
        if filename is None:
            filename = f"metrics_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

        export_path = self.log_dir / filename
        with open(export_path, 'w', encoding='utf-8') as f:
            json.dump(metrics_data, f, indent=2, default=str)

        logging.info(f"Metrics exported to {export_path}")
        return export_path
