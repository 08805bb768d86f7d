from django.template import (
    Context,
    Template,
)


def render(template_string, **context):
    return Template('{% load dynamic_form %}' + template_string).render(Context(context))


def test_error_messages_for_tag(post, user):
    assert render("{% error_messages_for 'post' 'user' %}", post=post, user=user) == (
        '<div id="error_explanation" class="error_explanation">'
        '<h2>2 errors prohibited this post from being saved</h2>'
        '<p>There were problems with the following fields:</p>'
        "<ul><li>Author name can't be empty</li><li>User email can't be empty</li></ul>"
        '</div>'
    )


def test_error_messages_for_tag_options(post, user):
    assert render(
        "{% error_messages_for 'user' 'post' object_name='chunky_bacon' header_message='' attrs__class='alert' %}",
        post=post,
        user=user,
    ) == (
        '<div id="error_explanation" class="alert">'
        '<p>There were problems with the following fields:</p>'
        "<ul><li>User email can't be empty</li><li>Author name can't be empty</li></ul>"
        '</div>'
    )


def test_error_messages_for_tag_with_object(post):
    assert render("{% error_messages_for post %}", post=post).startswith(
        '<div id="error_explanation" class="error_explanation"><h2>1 error prohibited this post from being saved</h2>'
    )


def test_error_messages_for_tag_missing_name():
    assert render("{% error_messages_for 'notthere' %}") == ''


def test_error_message_on_tag(post):
    assert render("{% error_message_on 'post' 'author_name' %}", post=post) == '<div class="formError">can\'t be empty</div>'
    assert render("{% error_message_on post 'author_name' %}", post=post) == '<div class="formError">can\'t be empty</div>'


def test_error_message_on_tag_options(post):
    assert render(
        "{% error_message_on post 'author_name' html_tag='span' css_class='differentError' prepend_text='before' append_text='after' %}",
        post=post,
    ) == '<span class="differentError">beforecan\'t be emptyafter</span>'


def test_error_message_on_tag_markup_is_not_escaped(dirty_post):
    assert render("{% error_message_on dirty_post 'author_name' %}", dirty_post=dirty_post) == (
        '<div class="formError">can\'t be <em>empty</em></div>'
    )


def test_error_message_on_tag_missing_name():
    assert render("{% error_message_on 'notthere' 'notthere' %}") == ''
