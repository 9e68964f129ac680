from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    surname: str
    email: str
    job_title: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
