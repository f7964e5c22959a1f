"""
E-Learning Final Exam Views Package

Dieses Paket enthält alle Views für das Prüfungssystem.

Features:
- Prüfungsverwaltung: Erstellen, Ändern, Löschen (rollenbasiert)
- Kandidaten-Views: Start, Abgabe, Übungsabgabe, Ergebnisse, Historie
- Report-Views: Statistiken, Teilnahme, Admin-Report

Author: Exam Backend Team
Version: 1.0.0
"""

from .exam_views import *
from .student_views import *
from .report_views import *
