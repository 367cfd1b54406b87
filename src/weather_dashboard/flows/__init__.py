"""
Prefect flows for the dashboard pipeline.

Flows:
- fetch: Download weather and news, apply fallbacks, assemble the report
- build: Render the report into dist/index.html

Usage (local):
    python -m weather_dashboard.flows.build

Usage (scheduled, e.g. cron or GitHub Actions):
    weather-dashboard refresh
"""
