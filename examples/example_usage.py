"""Example: payment figures straight from the service layer (no Flask).

The calculator itself needs no database at all; the second half shows the
same numbers for a stored mentor.
"""

import importlib

from config import get_settings_module

from src.mentor_system.mentor_system.container import build_container
from src.mentor_system.mentor_system.payments.calculator.standard_calculator import compute


def main():
    tasks = [
        {"taskType": "Lecture", "chapterName": "Ch1", "minutes": 150, "rating": 4},
        {"taskType": "Lecture", "chapterName": "Ch1", "minutes": 100, "rating": 4.5},
        {"taskType": "Content", "chaptersCompleted": 3},
    ]
    print(compute(tasks, 10).as_dict())

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.payment_report_service.summarize_mentor(1).as_dict())


if __name__ == "__main__":
    main()
