"""
Storage - Local durable state

The only persisted state is the default workspace preference.
"""
from .preferences import DefaultWorkspaceStore, PreferenceStoreException

__all__ = ["DefaultWorkspaceStore", "PreferenceStoreException"]
