from .main import create_app


def main() -> None:
    app = create_app()
    # One session owns the registry; keep request handling on one thread.
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=False)


if __name__ == "__main__":
    main()
