# Project tracker: observable project store, field validation, drag-and-drop buckets
#
# Components:
#   schema.py     - Data model (Project, ProjectStatus)
#   validation.py - Field constraint checks for submitted projects
#   store.py      - In-memory store with synchronous subscriber fan-out
#   dragdrop.py   - Drop-target protocol that moves projects between buckets
#   views.py      - Input form, bucket lists and item rendering
#   config.py     - YAML-backed runtime configuration
#   app.py        - Composition root and command-line demo
