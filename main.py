from config.settings import AppSettings
from services.logging_service import install_exception_hooks, setup_logging
from ui.main_window import MainWindow


def main():
    settings = AppSettings.from_env()
    log = setup_logging(settings)
    install_exception_hooks(log)
    MainWindow(settings, log).run()


if __name__ == "__main__":
    main()
