"""
E-Learning Package

Dieses Paket enthält das Prüfungs-Backend der Lernplattform.

Features:
- Rollenbasierte Berechtigungen für Prüfungsverwaltung und Reports
- Hierarchische Fragendatenbank (Kurs bis Unterkapitel)
- Zeitlich begrenzte Prüfungen mit fester Fragenauswahl
- Höchstens ein gewerteter Versuch pro Benutzer und Prüfung
- Übungsmodus ohne Speicherung
- Statistiken und Admin-Report

Struktur:
- users/: Profile, Rollen und Authentifizierung
- question_bank/: Fragendatenbank (nur Lesezugriff für die Engine)
- final_exam/: Prüfungs-Engine
- management/: Django Management Commands

Author: Exam Backend Team
Version: 1.0.0
"""
