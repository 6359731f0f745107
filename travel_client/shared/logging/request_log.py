"""
Request log for tracking transport call timing and outcomes.

Writes a JSON Lines file per client instance to the configured directory.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


class RequestLog:
    """
    Per-client log of transport calls.

    Tracks endpoint, timing, and failure kind for every call made through
    a TransportClient. Entries are written in JSON Lines format (one JSON
    object per line).
    """

    def __init__(self, logs_dir: str, file_name: str = "requests.jsonl"):
        """
        Initialize the request log.

        Args:
            logs_dir: Directory to store the log file
            file_name: Name of the JSON Lines file inside logs_dir
        """
        self.logs_dir = Path(logs_dir)
        self.log_file = self.logs_dir / file_name

        self.logs_dir.mkdir(parents=True, exist_ok=True)

        self._call_count = 0
        self._failure_count = 0
        self._total_duration_ms = 0.0
        self._failures_by_kind: Dict[str, int] = {}

    def _get_timestamp(self) -> str:
        """Get current UTC timestamp in ISO format."""
        return datetime.now(timezone.utc).isoformat()

    def _append_to_log(self, entry: Dict[str, Any]) -> None:
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")

    def log_call(
        self,
        method: str,
        endpoint: str,
        duration_ms: float,
        success: bool = True,
        failure_kind: Optional[str] = None,
        http_status: Optional[int] = None,
    ) -> None:
        """
        Log a single transport call.

        Args:
            method: HTTP method
            endpoint: Path relative to the API base address
            duration_ms: Wall time of the call in milliseconds
            success: Whether the call resolved with a payload
            failure_kind: Failure kind name when the call failed
            http_status: HTTP status, when a response was received
        """
        self._call_count += 1
        self._total_duration_ms += duration_ms

        entry = {
            "type": "api_call",
            "timestamp": self._get_timestamp(),
            "method": method,
            "endpoint": endpoint,
            "duration_ms": round(duration_ms, 2),
            "success": success,
        }

        if http_status is not None:
            entry["http_status"] = http_status

        if not success:
            self._failure_count += 1
            kind = failure_kind or "Unknown"
            self._failures_by_kind[kind] = self._failures_by_kind.get(kind, 0) + 1
            entry["failure_kind"] = kind

        self._append_to_log(entry)

    def get_accumulated_stats(self) -> Dict[str, Any]:
        """
        Get current accumulated statistics without logging.

        Returns:
            Dictionary with current totals
        """
        return {
            "call_count": self._call_count,
            "failure_count": self._failure_count,
            "failures_by_kind": dict(self._failures_by_kind),
            "total_duration_ms": round(self._total_duration_ms, 2),
        }
