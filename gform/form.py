###############################################################################
# Libraries
###############################################################################
from gform.helper import *
from gform.item import *


################################################################################
# Form URLs
################################################################################
def url_edit(id_form):
    return url_edit_form.format(id_form = id_form)

def url_view(id_form):
    return url_view_form.format(id_form = id_form)


################################################################################
# Read form
################################################################################
def get_form(service_forms, id_form):
    return service_forms.forms().get(formId = id_form).execute()

def list_config_item(config):
    # 'items' supports page breaks and headers, 'questions' is the legacy flat list
    return config.get('items') or config.get('questions') or []


################################################################################
# Create form
################################################################################
def create_form(service_forms, config):
    # Only the title can be set on creation
    form = {'info': {'title': clean_text(config['title'])}}
    form_created = service_forms.forms().create(body = form).execute()
    id_form = form_created.get('formId')
    if not id_form:
        raise RuntimeError('Failed to create form - no form ID returned')
    print('Form created with ID:', id_form)

    l_request = []
    if config.get('description'):
        l_request.append({'updateFormInfo': {'info': {'description': clean_text(config['description'])},
                                             'updateMask': 'description'}})

    # Only emailCollectionType is supported by the API
    collect_email = (config.get('settings') or {}).get('collectEmail')
    if collect_email in ['verified', 'input']:
        l_request.append({'updateSettings': {'settings': {'emailCollectionType': dict_collect_email[collect_email]},
                                             'updateMask': 'emailCollectionType'}})

    l_request += generate_request_create_item(list_config_item(config))

    if len(l_request) > 0:
        service_forms.forms().batchUpdate(formId = id_form, body = {'requests': l_request}).execute()

    print('Form URL:', url_edit(id_form))
    return id_form


################################################################################
# Update form
################################################################################
def update_form(service_forms, id_form, config):
    form = get_form(service_forms, id_form)
    n_item_exist = len(form.get('items', []))

    # Delete existing items
    l_request = generate_request_delete_item(list(range(n_item_exist)))

    # Update form title and description
    description = clean_text(config['description']) if config.get('description') else ''
    l_request.append({'updateFormInfo': {'info': {'title': clean_text(config['title']), 'description': description},
                                         'updateMask': 'title,description'}})

    # Always reset email collection setting
    collect_email = (config.get('settings') or {}).get('collectEmail')
    l_request.append({'updateSettings': {'settings': {'emailCollectionType': dict_collect_email.get(collect_email, 'DO_NOT_COLLECT')},
                                         'updateMask': 'emailCollectionType'}})

    # Create all new items
    l_request += generate_request_create_item(list_config_item(config))

    # Execute as one atomic batchUpdate
    service_forms.forms().batchUpdate(formId = id_form, body = {'requests': l_request}).execute()

    print('Form updated:', id_form)
    return id_form


################################################################################
# Delete question
################################################################################
def delete_question(service_forms, id_form, index_question):
    form = get_form(service_forms, id_form)
    l_item = form.get('items', [])

    if index_question < 0 or index_question >= len(l_item):
        raise IndexError(f'Question index {index_question} out of range')
    if not l_item[index_question].get('itemId'):
        raise ValueError('Item ID not found')

    l_request = generate_request_delete_item([index_question])
    service_forms.forms().batchUpdate(formId = id_form, body = {'requests': l_request}).execute()
