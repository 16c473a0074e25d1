import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from code_clinic.models import EventState, Member, Team
from .actions import (
    Action,
    ActionDecodeError,
    FinishQuestion,
    InitializeEvent,
    JoinOrCreateTeam,
    TIMER_PAUSE,
    TIMER_RESET,
    TIMER_START,
    TimerControl,
    UpdateQuestions,
    parse_action,
)
from .store import StateStore
from .timer import elapsed_ms, utc_now

_log = logging.getLogger(__name__)


class ActionDispatcher:
    """Apply actions to the event state and report whether it changed."""

    def __init__(self, store: StateStore, clock: Callable[[], datetime] = utc_now,
                 logger: Optional[logging.Logger] = None):
        self.store = store
        self.clock = clock
        self.logger = logger or _log
        self._handlers = {
            InitializeEvent: self._initialize_event,
            JoinOrCreateTeam: self._join_or_create_team,
            FinishQuestion: self._finish_question,
            UpdateQuestions: self._update_questions,
            TimerControl: self._timer_control,
        }

    def apply(self, action_type: Any, payload: Any = None) -> bool:
        try:
            action = parse_action(action_type, payload)
        except ActionDecodeError as exc:
            self.logger.error(f"[error] rejected action type={action_type!r}: {exc}")
            return False
        return self.apply_action(action)

    def apply_action(self, action: Action) -> bool:
        handler = self._handlers.get(type(action))
        if handler is None:
            self.logger.info(f"[action] ignored unknown action {action!r}")
            return False
        with self.store.mutate() as state:
            changed = handler(state, action)
        self.logger.info(f"[action] type={type(action).__name__} changed={changed}")
        return changed

    # ---- handlers: each returns True when the state was modified ----

    def _initialize_event(self, state: EventState, action: InitializeEvent) -> bool:
        if state.is_initialized:
            return False
        state.is_initialized = True
        return True

    def _join_or_create_team(self, state: EventState, action: JoinOrCreateTeam) -> bool:
        member = Member(user_id=action.user_id, user_name=action.user_name)
        team = state.teams.get(action.team_id)
        if team is None:
            state.teams[action.team_id] = Team(id=action.team_id, name=action.team_name, members=[member])
            return True
        if team.has_member(action.user_id):
            return False
        team.members.append(member)
        return True

    def _finish_question(self, state: EventState, action: FinishQuestion) -> bool:
        team = state.teams.get(action.team_id)
        # Unknown teams and non-members are ignored rather than reported
        if team is None or not team.has_member(action.user_id):
            return False
        if action.user_id in team.finished_members:
            return False
        team.finished_members.append(action.user_id)
        questions = state.questions_for_round()
        if len(team.finished_members) == len(team.members) \
                and team.current_question_index < len(questions):
            team.finish_times[f'q{team.current_question_index}'] = elapsed_ms(state, self.clock())
            team.current_question_index += 1
            team.finished_members = []
        return True

    def _update_questions(self, state: EventState, action: UpdateQuestions) -> bool:
        # Team progress is left alone: a shorter list can leave currentQuestionIndex
        # past the end until the next timer reset, and finishQuestion stops advancing.
        state.round1_questions = list(action.round1_questions)
        state.round2_questions = list(action.round2_questions)
        return True

    def _timer_control(self, state: EventState, action: TimerControl) -> bool:
        now = self.clock()
        if action.action == TIMER_START:
            # Measure before flipping the flag so paused gaps are not counted
            previously_elapsed = elapsed_ms(state, now)
            state.timer_running = True
            state.start_time = now - timedelta(milliseconds=previously_elapsed)
            state.pause_time = None
        elif action.action == TIMER_PAUSE:
            # A repeated pause keeps the first pauseTime so the frozen elapsed time stays put
            if state.timer_running or state.pause_time is None:
                state.pause_time = now
            state.timer_running = False
        elif action.action == TIMER_RESET:
            state.timer_running = False
            state.start_time = None
            state.pause_time = None
            for team in state.teams.values():
                team.reset_progress()
        return True
