from tests.fakes.fake_date_recognizer import FailingDateRecognizer, FakeDateRecognizer

__all__ = ["FailingDateRecognizer", "FakeDateRecognizer"]
