"""
Acetics CLI — Translation Set (i18n).

Prompt labels, validation messages and status names for the interactive
workflow. Resolution chain: configured language → "en" → key name.

Usage:
    labels = Labels("fr")
    labels.get("prompt_title")                      # → "Titre:"
    labels.get("config_bootstrap", path="/x.toml")  # parameterized
"""

from __future__ import annotations

from typing import Any, Dict, Optional

DEFAULT_LANGUAGE = "fr"

CALL_TASK_LABELS: Dict[str, Dict[str, str]] = {
    # --- Prompts ---
    "prompt_start_time": {
        "en": "New task - start time:",
        "fr": "Nouvelle tâche - heure de début:",
    },
    "prompt_end_time": {
        "en": "New task - end time:",
        "fr": "Nouvelle tâche - heure de fin:",
    },
    "prompt_description": {
        "en": "Description:",
        "fr": "Description:",
    },
    "prompt_title": {
        "en": "Title:",
        "fr": "Titre:",
    },
    "prompt_assignee": {
        "en": "Assign to:",
        "fr": "Assigner à:",
    },
    "prompt_status": {
        "en": "Status:",
        "fr": "Statut:",
    },
    "prompt_due_date": {
        "en": "Due date:",
        "fr": "Date d'échéance:",
    },
    "prompt_due_time": {
        "en": "Due time:",
        "fr": "Heure d'échéance:",
    },
    "prompt_confirm": {
        "en": "Do you want to save the task?",
        "fr": "Voulez-vous enregistrer la tâche ?",
    },

    # --- Prompt help ---
    "editor_help": {
        "en": "[e to open the editor, enter to submit]",
        "fr": "[e pour ouvrir l'éditeur, entrée pour valider]",
    },
    "select_help": {
        "en": "[type a number, enter for the highlighted choice]",
        "fr": "[tapez un numéro, entrée pour le choix en surbrillance]",
    },
    "confirm_yes": {
        "en": "y",
        "fr": "o",
    },
    "confirm_no": {
        "en": "n",
        "fr": "n",
    },

    # --- Status names ---
    "status_ongoing": {
        "en": "Ongoing",
        "fr": "En cours",
    },
    "status_closed": {
        "en": "Closed",
        "fr": "Terminé",
    },

    # --- Validation messages ---
    "error_required": {
        "en": "This field is required",
        "fr": "Le champ est obligatoire",
    },
    "error_invalid_time": {
        "en": "Please type a valid time (HH:MM).",
        "fr": "Veuillez saisir une heure valide (HH:MM).",
    },
    "error_invalid_date": {
        "en": "Please type a valid date.",
        "fr": "Veuillez saisir une date valide.",
    },
    "error_invalid_choice": {
        "en": "Please type a number between 1 and {count}.",
        "fr": "Veuillez saisir un numéro entre 1 et {count}.",
    },
    "error_invalid_confirm": {
        "en": "Please answer y or n.",
        "fr": "Veuillez répondre o ou n.",
    },

    # --- Outcome messages ---
    "canceled": {
        "en": "Canceled, nothing was saved.",
        "fr": "Annulé, rien n'a été enregistré.",
    },
    "not_saved": {
        "en": "Task not saved.",
        "fr": "Tâche non enregistrée.",
    },
    "config_bootstrap": {
        "en": "A default configuration has been written to {path}. "
              "Edit it with your endpoint, token and staff list, then run the command again.",
        "fr": "Une configuration par défaut a été créée dans {path}. "
              "Modifiez-la (endpoint, token, liste du personnel) puis relancez la commande.",
    },
}


class Labels:
    """Resolves CALL_TASK_LABELS entries for one language."""

    def __init__(self, language: Optional[str] = None, translations: Optional[Dict[str, Dict[str, str]]] = None):
        self.language = language or DEFAULT_LANGUAGE
        self._translations = translations if translations is not None else CALL_TASK_LABELS

    def get(self, key: str, lang: Optional[str] = None, **params: Any) -> str:
        translations = self._translations.get(key, {})
        if not translations:
            return key

        text = translations.get(lang or self.language, translations.get("en", key))

        if params:
            try:
                text = text.format(**params)
            except (KeyError, IndexError):
                pass

        return text


def available_languages() -> set:
    """Languages with at least one label."""
    languages = set()
    for translations in CALL_TASK_LABELS.values():
        languages.update(translations)
    return languages
