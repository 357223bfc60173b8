import uvicorn

from match_tracker.config import settings


def main():
    uvicorn.run("match_tracker.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
