from formulizer.reference_data import (
    get_help_content,
    list_return_types,
    render_help_markdown,
    return_type_options,
)


def test_return_types_verbatim():
    assert list_return_types() == [
        'String', 'Integer', 'Time', 'DateTime', 'Boolean',
        'Decimal', 'Double', 'Id', 'Date', 'Long',
    ]


def test_return_type_options_use_name_for_label_and_value():
    options = return_type_options()
    assert len(options) == 10
    assert all(o['label'] == o['value'] for o in options)
    assert options[0] == {'label': 'String', 'value': 'String'}


def test_help_content_shape():
    content = get_help_content()
    assert content['title'] == 'Welcome To Formulizer!'
    assert content['steps']
    assert [e['object'] for e in content['examples']] == ['Account', 'Case']
    for example in content['examples']:
        assert set(example) == {'formula_title', 'formula', 'object', 'return_type', 'expected_output'}


def test_help_content_is_a_copy():
    content = get_help_content()
    content['examples'][0]['object'] = 'Changed'
    assert get_help_content()['examples'][0]['object'] == 'Account'


def test_render_help_markdown_includes_examples():
    text = render_help_markdown(get_help_content())
    assert text.startswith('## Welcome To Formulizer!')
    assert 'Determine Customer Priority Based on Rating' in text
    assert '**Return Type:** DateTime' in text
