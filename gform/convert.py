###############################################################################
# Libraries
###############################################################################
import yaml
from gform.form import *
from gform.numbering import number_sections, number_flat_questions


################################################################################
# Read YAML form description
################################################################################
def read_yaml(path_yaml):
    with open(path_yaml, 'r', encoding = 'utf-8') as f:
        return yaml.safe_load(f) or {}


################################################################################
# Convert YAML question into form item
################################################################################
def normalize_options(l_option):
    # goToSection is not supported and dropped
    l_option_normalized = []
    for option in l_option or []:
        if not isinstance(option, dict):
            l_option_normalized.append(str(option))
        elif option.get('isOther'):
            l_option_normalized.append({'value': option.get('value', ''), 'isOther': True})
        else:
            l_option_normalized.append(str(option['value']))
    return l_option_normalized

def convert_question(q):
    type_q = q.get('type')
    item = {'title': q['title'], 'description': q.get('description'), 'required': q.get('required')}

    if type_q == 'text':
        item.update({'type': 'text', 'paragraph': False})
    elif type_q == 'paragraph':
        item.update({'type': 'text', 'paragraph': True})
    elif type_q in dict_type_choice.keys():
        item.update({'type': type_q, 'options': normalize_options(q.get('options'))})
    elif type_q == 'scale':
        scale = q.get('scale') or {}
        item.update({'type': 'scale', 'low': scale.get('min', 1), 'high': scale.get('max', 5),
                     'label_low': scale.get('minLabel'), 'label_high': scale.get('maxLabel')})
    elif type_q == 'date':
        item.update({'type': 'date', 'include_time': q.get('includeTime')})
    elif type_q == 'time':
        item.update({'type': 'time', 'duration': q.get('duration')})
    elif type_q == 'rating':
        item.update({'type': 'rating', 'rating_scale': q.get('ratingScale', 5), 'icon': q.get('icon', 'star')})
    elif type_q in dict_type_grid.keys():
        if not q.get('rows') or not q.get('columns'):
            raise ValueError(f'Grid question "{q["title"]}" requires rows and columns')
        item.update({'type': type_q, 'rows': [str(row) for row in q['rows']], 'columns': [str(column) for column in q['columns']]})
    elif type_q == type_title:
        item = {'type': type_title, 'title': q['title'], 'description': q.get('description')}
    else:
        print(f'Unknown question type: {type_q}, defaulting to text')
        item.update({'type': 'text', 'paragraph': False})

    return item


################################################################################
# Convert YAML form into form config
################################################################################
def apply_titles(l_question, l_title):
    return [{**q, 'title': title} for q, title in zip(l_question, l_title)]

def fill_type(l_question):
    # Questions without a type are single-line text
    return [{**q, 'type': q.get('type') or 'text'} for q in l_question or []]

def fill_type_section(l_section):
    return [{**section, 'questions': fill_type(section.get('questions'))} for section in l_section]

def yaml_to_config(dict_yaml):
    auto_number = dict_yaml.get('autoNumber') or False
    l_item = []

    if dict_yaml.get('pages'):
        # Multi-page form with page breaks
        l_page = fill_type_section(dict_yaml['pages'])
        l_numbered = number_sections(l_page) if auto_number else None
        for i, page in enumerate(l_page):
            title_page, l_question = page['title'], page.get('questions') or []
            if auto_number:
                title_page = l_numbered[i]['title_section']
                l_question = apply_titles(l_question, l_numbered[i]['l_title_question'])
            # Page break before each page except the first one
            if i > 0:
                l_item.append({'type': type_pagebreak, 'title': title_page, 'description': page.get('description')})
            l_item += [convert_question(q) for q in l_question]

    elif dict_yaml.get('sections'):
        # Visual sections as headers without page breaks
        l_section = fill_type_section(dict_yaml['sections'])
        l_numbered = number_sections(l_section) if auto_number else None
        for i, section in enumerate(l_section):
            title_section, l_question = section['title'], section.get('questions') or []
            if auto_number:
                title_section = l_numbered[i]['title_section']
                l_question = apply_titles(l_question, l_numbered[i]['l_title_question'])
            l_item.append({'type': type_title, 'title': title_section, 'description': section.get('description')})
            l_item += [convert_question(q) for q in l_question]

    elif dict_yaml.get('questions'):
        l_question = fill_type(dict_yaml['questions'])
        if auto_number:
            l_question = apply_titles(l_question, number_flat_questions(l_question))
        l_item += [convert_question(q) for q in l_question]

    config = {'title': dict_yaml['title'], 'description': dict_yaml.get('description'), 'items': l_item}
    if dict_yaml.get('settings'):
        config['settings'] = dict_yaml['settings']

    return config

def yaml_to_form(service_forms, path_yaml):
    config = yaml_to_config(read_yaml(path_yaml))
    print(f'Creating form "{config["title"]}" with {len(config["items"])} items...')
    return create_form(service_forms, config)
