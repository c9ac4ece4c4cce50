from cli.app import run_cli
from core.logging_config import setup_logging

if __name__ == "__main__":
    # у консоль і так друкуємо результат, тому в лог тільки попередження
    setup_logging(level="WARNING")
    run_cli()
