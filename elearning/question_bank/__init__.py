"""
E-Learning Question Bank Package

Dieses Paket enthält die Fragendatenbank, aus der Prüfungen zusammengestellt
werden. Die Prüfungs-Engine greift ausschließlich lesend darauf zu.

Struktur:
- models.py: Kurs, Gruppe, Fach, Kapitel, Unterkapitel, Frage
- repository.py: Lesezugriff per ID-Menge und Hierarchie-Filter
- serializers.py / views.py: Fragenauswahl für Prüfungsautoren

Author: Exam Backend Team
Version: 1.0.0
"""
