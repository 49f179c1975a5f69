"""Globetrotter - simple launcher."""
import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "globetrotter.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_excludes=["__pycache__/*", "globetrotter/data/*", "*.json"],
    )
