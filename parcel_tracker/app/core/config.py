"""
Configuration settings for the Parcel Tracker.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    
    # Application
    app_name: str = "Parcel Tracker"
    version: str = "0.1.0"
    log_level: str = "WARNING"
    
    # Registration Rules
    enforce_unique_ids: bool = False
    
    # Undo Behaviour
    # When False, undoing a delivery leaves its audit entry in place.
    reconcile_delivered_on_undo: bool = False
    
    class Config:
        env_prefix = "PARCEL_TRACKER_"
        env_file = ".env"
        case_sensitive = False


settings = Settings()
