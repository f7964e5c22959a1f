"""
E-Learning Final Exam Package

Dieses Paket enthält die Prüfungs-Engine: zeitlich begrenzte Multiple-Choice-
Prüfungen mit fester Fragenauswahl, höchstens einem gewerteten Versuch pro
Benutzer und Prüfung, deterministischer Bewertung und Statistiken.

Struktur:
- models.py: Exam und ExamResult
- exceptions.py: Fehlerhierarchie und DRF-Exception-Handler
- services/: Validierung, Prüfungsverwaltung, Zeitfenster, Bewertung,
  Versuchsbuch, Statistiken
- serializers.py: API-Serialisierung
- views/: Verwaltungs-, Kandidaten- und Report-Views

Author: Exam Backend Team
Version: 1.0.0
"""
