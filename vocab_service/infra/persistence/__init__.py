"""Flat-file JSON persistence used by the subscription and word stores."""

from vocab_service.infra.persistence.json_file import JsonListFile, JsonListRepository

__all__ = ["JsonListFile", "JsonListRepository"]
