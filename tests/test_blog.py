"""
Tests for blog publishing rules and the public blog API.
"""

import pytest
from django.urls import reverse
from rest_framework import status

from blog.models import BlogPost
from blog.sanitize import sanitize_html


class TestSanitize:

    def test_scripts_and_handlers_are_removed(self):
        html = '<p onclick="steal()">Porez<script>alert(1)</script></p>'
        cleaned = sanitize_html(html)
        assert '<script' not in cleaned
        assert 'onclick' not in cleaned
        assert '<p>' in cleaned

    def test_javascript_links_are_dropped(self):
        cleaned = sanitize_html('<a href="javascript:alert(1)">klik</a>')
        assert 'javascript:' not in cleaned

    def test_formatting_survives(self):
        html = '<h2>Naslov</h2><ul><li><strong>PDV</strong></li></ul>'
        assert sanitize_html(html) == html

    def test_empty(self):
        assert sanitize_html(None) == ''


@pytest.mark.django_db
class TestPublishing:

    def test_content_is_sanitized_on_save(self, blog_post_factory):
        post = blog_post_factory(content='<p>Tekst</p><script>x()</script>')
        post.refresh_from_db()
        assert '<script' not in post.content

    def test_published_at_set_on_first_publish(self, blog_post_factory):
        post = blog_post_factory(is_published=False)
        assert post.published_at is None

        post.is_published = True
        post.save()
        first_published = post.published_at
        assert first_published is not None

        post.title = 'Izmijenjen naslov'
        post.save()
        assert post.published_at == first_published

    def test_unpublish_clears_published_at(self, blog_post_factory):
        post = blog_post_factory(is_published=True)

        post.is_published = False
        post.save()

        assert post.published_at is None

    def test_slug_from_title_is_unique(self, blog_post_factory):
        first = blog_post_factory(title='Novi porezni propisi')
        second = blog_post_factory(title='Novi porezni propisi')

        assert first.slug == 'novi-porezni-propisi'
        assert second.slug == 'novi-porezni-propisi-2'


@pytest.mark.django_db
class TestPublicBlogApi:

    def test_list_shows_published_only(self, api_client, blog_post_factory):
        published = blog_post_factory()
        blog_post_factory(is_published=False)

        response = api_client.get(reverse('blog-posts'))

        assert response.status_code == status.HTTP_200_OK
        assert [p['id'] for p in response.data['results']] == [published.id]

    def test_homepage_category_and_tag_filters(self, api_client, blog_post_factory,
                                               blog_category_factory, blog_tag_factory):
        taxes = blog_category_factory(name='Porezi')
        vat = blog_tag_factory(name='pdv')
        on_home = blog_post_factory(show_on_homepage=True, category=taxes)
        on_home.tags.add(vat)
        blog_post_factory(show_on_homepage=False)

        homepage = api_client.get(reverse('blog-posts'), {'homepage': 'true'})
        by_category = api_client.get(reverse('blog-posts'), {'category': taxes.slug})
        by_tag = api_client.get(reverse('blog-posts'), {'tag': 'pdv'})

        for response in (homepage, by_category, by_tag):
            assert [p['id'] for p in response.data['results']] == [on_home.id]

    def test_draft_detail_is_not_found(self, api_client, blog_post_factory):
        draft = blog_post_factory(is_published=False)

        response = api_client.get(reverse('blog-post-detail', kwargs={'slug': draft.slug}))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_published_detail(self, api_client, blog_post_factory):
        post = blog_post_factory(content='<p>Sadržaj</p>')

        response = api_client.get(reverse('blog-post-detail', kwargs={'slug': post.slug}))

        assert response.data['content'] == '<p>Sadržaj</p>'


@pytest.mark.django_db
class TestAdminBlogApi:

    def test_create_post_with_tags(self, staff_client, blog_tag_factory):
        client, user = staff_client
        tag = blog_tag_factory()

        response = client.post(reverse('admin-blog-posts'), {
            'title': 'Rokovi za PDV prijave',
            'content': '<p>Do 10. u mjesecu</p><iframe src="x"></iframe>',
            'is_published': True,
            'tags': [tag.id],
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        post = BlogPost.objects.get(id=response.data['id'])
        assert post.author == user
        assert post.published_at is not None
        assert '<iframe' not in post.content
        assert list(post.tags.all()) == [tag]
