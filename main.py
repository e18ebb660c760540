###############################################################################
# Libraries
###############################################################################
import os
import click
import yaml
from gform.helper import *
from gform.form import *
from gform.convert import *
from gform.drive import *
from gform.responses import *
from gform.example import dict_config_example


def print_urls(id_form):
    click.echo(f'Edit URL: {url_edit(id_form)}')
    click.echo(f'View URL: {url_view(id_form)}')

def run_api(func, *args):
    # API and input errors end the command with a message
    try:
        return func(*args)
    except HttpError as error:
        raise click.ClickException(f'Google API error: {error}')
    except yaml.YAMLError as error:
        raise click.ClickException(f'Invalid YAML: {error}')
    except KeyError as error:
        raise click.ClickException(f'Missing key: {error}')
    except (ValueError, IndexError, RuntimeError, FileNotFoundError) as error:
        raise click.ClickException(str(error))


###############################################################################
# Command line
###############################################################################
@click.group()
@click.option('--dir-credentials', default = os.getcwd, type = click.Path(file_okay = False),
              help = 'Directory holding credentials.json and token.json.')
@click.pass_context
def main(ctx, dir_credentials):
    """Create and manage Google Forms from YAML descriptions."""
    ctx.obj = {'dir_credentials': dir_credentials}

def services(ctx):
    return run_api(prep_services, ctx.obj['dir_credentials'])


@main.command()
@click.argument('path_yaml', type = click.Path(exists = True, dir_okay = False))
@click.pass_context
def create(ctx, path_yaml):
    """Create a form from the YAML file PATH_YAML."""
    service_forms, _ = services(ctx)
    id_form = run_api(yaml_to_form, service_forms, path_yaml)
    click.echo('\n✓ Form created successfully!\n')
    print_urls(id_form)


@main.command()
@click.argument('id_form')
@click.argument('path_yaml', type = click.Path(exists = True, dir_okay = False))
@click.pass_context
def update(ctx, id_form, path_yaml):
    """Replace the content of form ID_FORM with the YAML file PATH_YAML."""
    service_forms, _ = services(ctx)
    config = run_api(lambda: yaml_to_config(read_yaml(path_yaml)))
    run_api(update_form, service_forms, id_form, config)
    print_urls(id_form)


@main.command(name = 'list')
@click.pass_context
def list_(ctx):
    """List Google Forms in Google Drive."""
    _, service_drive = services(ctx)
    click.echo('Fetching forms...\n')
    d_form = run_api(list_forms, service_drive)
    if len(d_form) == 0:
        click.echo('No forms found.')
        return
    print_forms(d_form)


@main.command()
@click.pass_context
def delete(ctx):
    """Select and delete Google Forms."""
    _, service_drive = services(ctx)
    click.echo('Fetching forms...\n')
    d_form = run_api(list_forms, service_drive)
    if len(d_form) == 0:
        click.echo('No forms found.')
        return
    print_forms(d_form)

    answer = click.prompt('Enter form numbers to delete (comma-separated), "all", or press Enter to cancel',
                          default = '', show_default = False)
    if answer.strip() == '':
        click.echo('No forms deleted.')
        return
    l_index = parse_selection(answer, len(d_form))
    if len(l_index) == 0:
        click.echo('No valid forms selected.')
        return

    click.echo(f'\nDeleting {len(l_index)} form(s)...')
    delete_forms(service_drive, d_form, l_index)


@main.command()
@click.argument('id_form')
@click.pass_context
def validate(ctx, id_form):
    """Flag empty "Other" answers in the responses of ID_FORM."""
    service_forms, _ = services(ctx)
    d_issue, n_response = run_api(validate_responses, service_forms, id_form)
    if n_response == 0:
        click.echo('\nNo responses found.')
        return

    click.echo(f'\nFound {n_response} response(s). Validating...\n')
    if len(d_issue) == 0:
        click.echo('✓ All responses valid. No empty "Other" selections found.')
        return

    click.echo(f'Found {len(d_issue)} potential issue(s):\n')
    for row in d_issue.itertuples():
        click.echo(f'Response: {row.id_response}')
        if row.email:
            click.echo(f'  Email: {row.email}')
        click.echo(f'  Question: {row.title_question}')
        click.echo(f'  Issue: {row.issue}')
        click.echo(f'  Submitted: {row.time_submitted}\n')


@main.command()
@click.argument('id_form')
@click.argument('path_csv', type = click.Path(dir_okay = False))
@click.pass_context
def export(ctx, id_form, path_csv):
    """Export the responses of ID_FORM to PATH_CSV."""
    service_forms, _ = services(ctx)
    n_response = run_api(export_responses_csv, service_forms, id_form, path_csv)
    if n_response == 0:
        click.echo('No responses found.')
    else:
        click.echo(f'Exported {n_response} response(s) to {path_csv}')


@main.command()
@click.argument('id_form')
@click.pass_context
def count(ctx, id_form):
    """Print the number of responses of ID_FORM."""
    service_forms, _ = services(ctx)
    click.echo(run_api(count_responses, service_forms, id_form))


@main.command()
@click.pass_context
def example(ctx):
    """Create the example customer feedback form."""
    service_forms, _ = services(ctx)
    id_form = run_api(create_form, service_forms, dict_config_example)
    click.echo(f'\nSuccess! Form created with ID: {id_form}')
    print_urls(id_form)


if __name__ == '__main__':
    main()
