"""Nutrition and workout plan generation from an onboarding profile."""

__version__ = "0.1.0"
