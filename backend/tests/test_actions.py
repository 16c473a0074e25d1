import json

import pytest

from code_clinic.models import Question
from code_clinic.services.event import ActionDecodeError, decode_message, parse_action
from code_clinic.services.event.actions import (
    FinishQuestion,
    InitializeEvent,
    JoinOrCreateTeam,
    TimerControl,
    UnknownAction,
    UpdateQuestions,
)


def test_decode_join_from_json_text():
    raw = json.dumps({
        'type': 'joinOrCreateTeam',
        'payload': {'teamId': 't1', 'teamName': 'Alpha', 'userName': 'Alice', 'userId': 'u1'},
    })
    assert decode_message(raw) == JoinOrCreateTeam(team_id='t1', team_name='Alpha', user_name='Alice', user_id='u1')


def test_decode_accepts_bytes_and_mappings():
    assert decode_message(b'{"type": "initializeEvent"}') == InitializeEvent()
    assert decode_message({'type': 'timerControl', 'payload': {'action': 'pause'}}) == TimerControl(action='pause')


def test_numeric_ids_are_normalized_to_strings():
    action = parse_action('finishQuestion', {'teamId': 7, 'userId': 1700000000000})
    assert action == FinishQuestion(team_id='7', user_id='1700000000000')


def test_update_questions_missing_lists_become_empty():
    action = parse_action('updateQuestions', {'round1Questions': [{'title': 'A', 'content': 'print(1)'}]})
    assert action == UpdateQuestions(round1_questions=(Question('A', 'print(1)'),), round2_questions=())


def test_unknown_type_is_not_an_error():
    assert decode_message('{"type": "danceParty", "payload": {}}') == UnknownAction(action_type='danceParty')


@pytest.mark.parametrize('raw', [
    'not json at all',
    '[1, 2, 3]',
    '{"payload": {}}',
    '{"type": 42}',
    b'\xff\xfe',
])
def test_malformed_envelopes_are_rejected(raw):
    with pytest.raises(ActionDecodeError):
        decode_message(raw)


@pytest.mark.parametrize('action_type,payload', [
    ('joinOrCreateTeam', None),
    ('joinOrCreateTeam', {'teamId': 't1', 'teamName': 'Alpha', 'userName': 'Alice'}),
    ('joinOrCreateTeam', {'teamId': True, 'teamName': 'Alpha', 'userName': 'Alice', 'userId': 'u1'}),
    ('finishQuestion', {'teamId': 't1'}),
    ('finishQuestion', {'teamId': '', 'userId': 'u1'}),
    ('updateQuestions', None),
    ('updateQuestions', {'round1Questions': 'nope'}),
    ('updateQuestions', {'round1Questions': [{'title': 'missing content'}]}),
    ('timerControl', {'action': 'rewind'}),
    ('timerControl', {}),
])
def test_missing_or_invalid_fields_are_rejected(action_type, payload):
    with pytest.raises(ActionDecodeError):
        parse_action(action_type, payload)
