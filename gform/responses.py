###############################################################################
# Libraries
###############################################################################
from gform.helper import *
from gform.form import get_form


################################################################################
# Read responses from Google forms
################################################################################
def get_responses(service_forms, id_form):
    resp = service_forms.forms().responses().list(formId = id_form).execute()
    return resp.get('responses', [])

def count_responses(service_forms, id_form):
    return len(get_responses(service_forms, id_form))

def map_question_title(form, sep_grid = True):
    # Build a mapping of questionId → title
    qid2title = {}
    for item in form.get('items', []):
        title = item.get('title', '' if sep_grid else 'Unknown')
        if 'questionItem' in item:
            qid = item['questionItem'].get('question', {}).get('questionId')
            if qid:
                qid2title[qid] = title
        elif 'questionGroupItem' in item:
            for q in item['questionGroupItem'].get('questions', []):
                qid = q.get('questionId')
                if qid:
                    if sep_grid:
                        qid2title[qid] = title + ' [' + q.get('rowQuestion', {}).get('title', '') + ']'
                    else:
                        qid2title[qid] = title
    return qid2title

def list_text_answer(answer):
    return [t.get('value', '') for t in answer.get('textAnswers', {}).get('answers', [])]


################################################################################
# Convert responses into DataFrame
################################################################################
def responses_to_dataframe(form, l_response):
    qid2title = map_question_title(form)

    # Question IDs in order of first appearance
    l_qid = []
    for r in l_response:
        for qid in r.get('answers', {}).keys():
            if qid not in l_qid:
                l_qid.append(qid)

    l_timestamp = [r.get('lastSubmittedTime') or r.get('createTime') or '' for r in l_response]
    dict_l_answer = {}
    for qid in l_qid:
        l_answer = [np.nan] * len(l_response)
        for idx, r in enumerate(l_response):
            answer = r.get('answers', {}).get(qid)
            if answer is not None and 'textAnswers' in answer:
                l_answer[idx] = '; '.join(list_text_answer(answer))
        dict_l_answer[qid] = l_answer

    d_response = pd.DataFrame(dict_l_answer, columns = l_qid, index = range(len(l_response)))
    # Titles may be duplicated, so columns are renamed positionally
    d_response.columns = [qid2title.get(qid, qid) for qid in l_qid]
    d_response.insert(0, 'Timestamp', l_timestamp)

    return d_response


################################################################################
# Export responses as CSV
################################################################################
def export_responses_csv(service_forms, id_form, path_csv):
    form = get_form(service_forms, id_form)
    l_response = get_responses(service_forms, id_form)
    if len(l_response) == 0:
        return 0

    d_response = responses_to_dataframe(form, l_response)
    d_response.to_csv(path_csv, index = False, encoding = 'utf-8')

    return len(l_response)


################################################################################
# Validate responses
################################################################################
def validate_responses(service_forms, id_form):
    print('Fetching form structure...')
    form = get_form(service_forms, id_form)
    print('Fetching responses...')
    l_response = get_responses(service_forms, id_form)
    qid2title = map_question_title(form, sep_grid = False)

    l_issue = []
    for r in l_response:
        for qid, answer in r.get('answers', {}).items():
            if 'textAnswers' not in answer:
                continue
            for value in list_text_answer(answer):
                # An empty text answer is most likely an empty "Other" selection
                if value == '':
                    l_issue.append([r.get('responseId', 'unknown'),
                                    r.get('respondentEmail', ''),
                                    qid2title.get(qid, 'Unknown question'),
                                    'Empty text response (possibly empty "Other" selection)',
                                    r.get('lastSubmittedTime', 'unknown')])

    d_issue = pd.DataFrame(l_issue, columns = ['id_response', 'email', 'title_question', 'issue', 'time_submitted'])

    return d_issue, len(l_response)
