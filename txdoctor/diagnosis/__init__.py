from txdoctor.diagnosis.base import BaseDiagnoser
from txdoctor.diagnosis.batch import BatchAnalyzer
from txdoctor.diagnosis.diagnoser import Diagnoser
from txdoctor.diagnosis.factory import DiagnoserFactory

__all__ = ["BaseDiagnoser", "BatchAnalyzer", "Diagnoser", "DiagnoserFactory"]
