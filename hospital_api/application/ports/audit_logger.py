from typing import Optional, Dict, Any, Protocol


class AuditLogger(Protocol):
    def log(self, entity: str, action: str, entity_id: int, details: Optional[Dict[str, Any]] = None) -> None:
        ...
