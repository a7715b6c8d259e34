"""Headless checklist session.

The session keeps the current answers and pasted contact text, listens to
the config store, and regenerates outputs on every relevant change:
1) answer or contact text edited by the caller
2) config saved (responsible name or templates changed)

Outputs are recomputed from scratch each time; the engine holds no state.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from core.config import ChecklistConfig
from core.models import GeneratedOutputs
from core.ports import ConfigStorePort
from core.processor import ChecklistEngine

LOGGER = logging.getLogger(__name__)

OutputsListener = Callable[[GeneratedOutputs], None]


class ChecklistSession:
    """Holds one checklist instance and its latest generated outputs."""

    def __init__(
        self,
        store: ConfigStorePort,
        engine: Optional[ChecklistEngine] = None,
    ) -> None:
        self._store = store
        self._config = store.load()
        self._engine = engine
        self._answers: dict[str, str] = {}
        self._raw_contact_text = ""
        self._listeners: list[OutputsListener] = []
        self._unsubscribe = store.subscribe(self._on_config_changed)
        self._outputs = self._regenerate()

    @property
    def answers(self) -> dict[str, str]:
        return dict(self._answers)

    @property
    def raw_contact_text(self) -> str:
        return self._raw_contact_text

    @property
    def config(self) -> ChecklistConfig:
        return self._config

    @property
    def outputs(self) -> GeneratedOutputs:
        return self._outputs

    def set_answer(self, question_id: str, value: str) -> GeneratedOutputs:
        if value:
            self._answers[question_id] = value
        else:
            self._answers.pop(question_id, None)
        return self._refresh()

    def update_answers(self, answers: Mapping[str, str]) -> GeneratedOutputs:
        for question_id, value in answers.items():
            if value:
                self._answers[question_id] = value
            else:
                self._answers.pop(question_id, None)
        return self._refresh()

    def set_raw_contact_text(self, raw_text: str) -> GeneratedOutputs:
        self._raw_contact_text = raw_text
        return self._refresh()

    def clear(self) -> GeneratedOutputs:
        self._answers = {}
        self._raw_contact_text = ""
        return self._refresh()

    def subscribe(self, listener: OutputsListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Stop listening to the config store."""

        self._unsubscribe()
        self._listeners.clear()

    def _on_config_changed(self, config: ChecklistConfig) -> None:
        LOGGER.debug("Config changed; regenerating outputs")
        self._config = config
        self._refresh()

    def _regenerate(self) -> GeneratedOutputs:
        engine = self._engine or ChecklistEngine(output=self._config.output)
        return engine.generate(
            self._answers,
            self._raw_contact_text,
            self._config.templates,
            self._config.responsible_name,
        )

    def _refresh(self) -> GeneratedOutputs:
        self._outputs = self._regenerate()
        for listener in list(self._listeners):
            listener(self._outputs)
        return self._outputs
