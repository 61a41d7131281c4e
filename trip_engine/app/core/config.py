"""
Configuration settings for the Trip Engine.

This module handles application configuration using Pydantic settings.
Engine thresholds live here so they can be tuned per deployment.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    
    # Application
    app_name: str = "Trip Engine"
    api_version: str = "v1"
    debug: bool = True
    
    # Stop / destination arrival checks
    arrival_radius_km: float = 0.5
    arrival_tolerance_minutes: float = 30
    
    # Trip start window
    start_soft_window_minutes: float = 30
    start_hard_window_minutes: float = 180
    
    # Schedule estimation
    per_stop_overhead_minutes: float = 30
    max_advance_booking_months: int = 2
    
    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
