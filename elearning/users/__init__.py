"""
E-Learning Users Package

Dieses Paket enthält die Benutzer- und Berechtigungsschicht des Exam-Backends.

Features:
- Benutzerprofile mit Rolle (user, admin, super_admin)
- Unveränderliche Rollen-Berechtigungs-Tabelle
- DRF-Permission-Klassen für Prüfungsverwaltung und Reports
- JWT-Login mit Rolleninformationen im Token

Struktur:
- models.py: Profile, Rollen und Signal-Handler
- roles.py: Rollen-Berechtigungs-Tabelle
- permissions.py: DRF-Permission-Klassen
- serializers.py / views/: Token-Ausgabe

Author: Exam Backend Team
Version: 1.0.0
"""
