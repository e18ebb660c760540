###############################################################################
# Libraries
###############################################################################
import re
from gform.parameter import *


################################################################################
# Clean up text from YAML parsing
################################################################################
def clean_text(text):
    # Single newlines are line-wrap artifacts, double newlines are paragraph breaks
    text = text.replace('\r\n', '\n')
    l_paragraph = re.split(r'\n{2,}', text)
    l_paragraph = [paragraph.replace('\n', ' ') for paragraph in l_paragraph]
    text = '\n\n'.join(l_paragraph)
    text = re.sub(r' {2,}', ' ', text)
    return text.strip()


################################################################################
# Build Google Forms item bodies
################################################################################
def build_choice_options(l_option):
    l_regular = []
    l_other = []
    for option in l_option:
        if isinstance(option, str):
            l_regular.append({'value': option})
        elif option.get('isOther'):
            l_other.append({'isOther': True})
        else:
            l_regular.append({'value': option['value']})

    # Google Forms API requires "Other" option to be last
    return l_regular + l_other

def build_item_base(item):
    item_base = {'title': clean_text(item['title'])}
    if item.get('description'):
        item_base['description'] = clean_text(item['description'])
    return item_base

def build_item(item):
    if item['type'] == type_pagebreak:
        return {**build_item_base(item), 'pageBreakItem': {}}
    if item['type'] == type_title:
        # textItem creates a title/description without page break
        return {**build_item_base(item), 'textItem': {}}
    return build_question_item(item)

def build_question_item(item):
    type_item = item['type']
    required = item.get('required') or False

    if type_item in dict_type_grid.keys():
        return {**build_item_base(item),
                'questionGroupItem': {
                    'grid': {'columns': {'type': dict_type_grid[type_item],
                                         'options': [{'value': column} for column in item['columns']]}},
                    'questions': [{'required': required, 'rowQuestion': {'title': row}} for row in item['rows']]
                }}

    if type_item == 'text':
        question = {'textQuestion': {'paragraph': item.get('paragraph') or False}}
    elif type_item in dict_type_choice.keys():
        question = {'choiceQuestion': {'type': dict_type_choice[type_item],
                                       'options': build_choice_options(item['options'])}}
    elif type_item == 'scale':
        question = {'scaleQuestion': {'low': item['low'], 'high': item['high']}}
        if item.get('label_low') is not None:
            question['scaleQuestion']['lowLabel'] = item['label_low']
        if item.get('label_high') is not None:
            question['scaleQuestion']['highLabel'] = item['label_high']
    elif type_item == 'date':
        question = {'dateQuestion': {'includeTime': item.get('include_time') or False}}
    elif type_item == 'time':
        question = {'timeQuestion': {'duration': item.get('duration') or False}}
    elif type_item == 'rating':
        question = {'ratingQuestion': {'ratingScaleLevel': item['rating_scale'],
                                       'iconType': dict_icon_rating.get(item.get('icon'), 'STAR')}}
    else:
        raise ValueError(f'Unknown question type: {type_item}')

    return {**build_item_base(item), 'questionItem': {'question': {'required': required, **question}}}


################################################################################
# Generate batchUpdate requests
################################################################################
def generate_request_create_item(l_item):
    l_request = []
    for index, item in enumerate(l_item):
        l_request.append({
            'createItem': {
                'item': build_item(item),
                'location': {'index': index}
            }
        })

    return l_request

def generate_request_delete_item(l_index):
    # Delete from the end so that earlier indices are not shifted
    l_request = []
    for index in reversed(sorted(l_index)):
        l_request.append({
            'deleteItem': {
                'location': {'index': index}
            }
        })

    return l_request
