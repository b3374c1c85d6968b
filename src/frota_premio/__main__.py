from .main import create_app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=bool(app.config.get("DEBUG")))


if __name__ == "__main__":
    main()
