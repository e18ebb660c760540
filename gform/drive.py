###############################################################################
# Libraries
###############################################################################
from gform.helper import *


################################################################################
# List Google forms in Google drive
################################################################################
def list_forms(service_drive):
    resp = service_drive.files().list(
        q = f"mimeType='{mimetype_form}'",
        fields = 'files(id, name, createdTime)',
        orderBy = 'createdTime desc'
    ).execute()
    l_file = resp.get('files', [])

    d_form = pd.DataFrame({'id_form': [f.get('id', '') for f in l_file],
                           'name_form': [f.get('name', '') for f in l_file],
                           'time_created': [f.get('createdTime', '') for f in l_file]},
                          columns = ['id_form', 'name_form', 'time_created'])

    return d_form

def print_forms(d_form):
    print(f'Found {len(d_form)} Google Forms:\n')
    for i, row in enumerate(d_form.itertuples(), start = 1):
        print(f'{i}. {row.name_form}')
        print(f'   ID: {row.id_form}')
        print(f'   Created: {row.time_created}\n')


################################################################################
# Delete Google forms
################################################################################
def delete_form(service_drive, id_form):
    service_drive.files().delete(fileId = id_form).execute()

def parse_selection(answer, n_form):
    # '' for none, 'all' for all, otherwise comma-separated 1-based numbers
    answer = answer.strip()
    if answer == '':
        return []
    if answer.lower() == 'all':
        return list(range(n_form))

    l_index = []
    for str_num in answer.split(','):
        str_num = str_num.strip()
        if not str_num.isdigit():
            continue
        index = int(str_num) - 1
        if 0 <= index < n_form and index not in l_index:
            l_index.append(index)

    return l_index

def delete_forms(service_drive, d_form, l_index):
    l_id_deleted = []
    for index in l_index:
        id_form = d_form['id_form'].iloc[index]
        name_form = d_form['name_form'].iloc[index]
        try:
            delete_form(service_drive, id_form)
            print('Deleted:', name_form)
            l_id_deleted.append(id_form)
        except HttpError as error:
            print(f'Failed to delete {name_form}: {error}')

    return l_id_deleted
