from unittest.mock import Mock

import pytest


@pytest.fixture
def service_forms():
    service = Mock()
    service.forms().create().execute.return_value = {'formId': 'form123'}
    service.forms().batchUpdate().execute.return_value = {}
    return service


@pytest.fixture
def service_drive():
    return Mock()


@pytest.fixture
def form():
    return {
        'formId': 'form123',
        'items': [
            {'itemId': 'i1', 'title': 'Your name',
             'questionItem': {'question': {'questionId': 'q1'}}},
            {'itemId': 'i2', 'title': 'How did you hear about us?',
             'questionItem': {'question': {'questionId': 'q2'}}},
            {'itemId': 'i3', 'title': 'Rate',
             'questionGroupItem': {'questions': [
                 {'questionId': 'q3', 'rowQuestion': {'title': 'Speed'}},
                 {'questionId': 'q4', 'rowQuestion': {'title': 'Price'}},
             ]}},
            {'itemId': 'i4', 'title': 'About you', 'textItem': {}},
        ],
    }


@pytest.fixture
def l_response():
    return [
        {'responseId': 'r1', 'respondentEmail': 'a@example.com',
         'lastSubmittedTime': '2024-01-01T10:00:00Z',
         'answers': {
             'q1': {'questionId': 'q1', 'textAnswers': {'answers': [{'value': 'Alice'}]}},
             'q2': {'questionId': 'q2', 'textAnswers': {'answers': [{'value': ''}]}},
         }},
        {'responseId': 'r2', 'createTime': '2024-01-02T10:00:00Z',
         'answers': {
             'q1': {'questionId': 'q1', 'textAnswers': {'answers': [{'value': 'Bob, Jr.'}]}},
             'q3': {'questionId': 'q3', 'textAnswers': {'answers': [{'value': 'Good'}, {'value': 'Fast'}]}},
         }},
    ]
