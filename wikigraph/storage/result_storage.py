import json
import logging
import re
from pathlib import Path
from datetime import datetime
from typing import Any
import aiofiles
from ..utils.text import subject_from_url

logger = logging.getLogger(__name__)


class ResultStorage:
    """Writes the output of a crawl run as JSON files

    Layout: base_path/<seed_subject>_<timestamp>/{pages,graph,summary}.json
    """

    def __init__(self, base_path='wikigraph_data/crawls'):
        self.base_path = Path(base_path)
        self.run_dir = None

    def start_run(self, seed_url: str) -> Path:
        """Create the directory for this run"""
        subject = subject_from_url(seed_url) or "crawl"
        clean_subject = re.sub(r'[^A-Za-z0-9]+', '_', subject).strip('_').lower() or "crawl"
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

        self.run_dir = self.base_path / f"{clean_subject}_{timestamp}"
        self.run_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Storing crawl output in {self.run_dir}")
        return self.run_dir

    async def save_json(self, name: str, data: Any) -> Path:
        """Write ``data`` to ``<run_dir>/<name>.json``"""
        if self.run_dir is None:
            raise RuntimeError("start_run() must be called before saving")

        file_path = self.run_dir / f"{name}.json"
        async with aiofiles.open(file_path, 'w', encoding='utf-8') as f:
            await f.write(json.dumps(data, indent=2, ensure_ascii=False, default=str))

        logger.info(f"💾 Saved {file_path}")
        return file_path
