"""
Start the API server
Usage: uv run serve [--reload]
"""
import uvicorn
import sys


def main():
    """Run the FastAPI app with uvicorn"""
    reload = "--reload" in sys.argv
    uvicorn.run(
        "libur_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=reload
    )


if __name__ == "__main__":
    main()
