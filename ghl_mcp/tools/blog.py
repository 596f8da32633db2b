# blog.py  –  blog sites, posts, authors, categories and slug checks

import datetime as dt

from ..marshal import pick, unwrap
from .base import ToolModule, tool

POST_STATUSES = ["DRAFT", "PUBLISHED", "SCHEDULED", "ARCHIVED"]
CONTENT_FIELD = {"content": "rawHTML"}
STRINGS = {"type": "array", "items": {"type": "string"}}


def utc_now_iso() -> str:
    """Current UTC time as e.g. 2024-05-01T12:00:00.000Z."""
    now = dt.datetime.now(dt.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _s(description):
    return {"type": "string", "description": description}


def _page(what, default):
    return {"type": "number", "description": f"Number of {what} (default: {default})", "default": default}


class BlogTools(ToolModule):
    domain = "blog"

    @tool("create_blog_post",
          "Create a new blog post in GoHighLevel. Requires blog ID, author ID, and category IDs which can be "
          "obtained from other blog tools.", {
              "title": _s("Blog post title"),
              "blogId": _s("Blog site ID (use get_blog_sites to find available blogs)"),
              "content": _s("Full HTML content of the blog post"),
              "description": _s("Short description/excerpt of the blog post"),
              "imageUrl": _s("URL of the featured image for the blog post"),
              "imageAltText": _s("Alt text for the featured image (for SEO and accessibility)"),
              "urlSlug": _s("URL slug for the blog post (use check_url_slug to verify availability)"),
              "author": _s("Author ID (use get_blog_authors to find available authors)"),
              "categories": {**STRINGS, "description": "Array of category IDs (use get_blog_categories to find available categories)"},
              "tags": {**STRINGS, "description": "Optional array of tags for the blog post"},
              "status": {"type": "string", "enum": POST_STATUSES, "description": "Publication status of the blog post",
                         "default": "DRAFT"},
              "canonicalLink": _s("Optional canonical URL for SEO"),
              "publishedAt": _s("Optional ISO timestamp for publication date (defaults to now for PUBLISHED status)"),
          }, required=["title", "blogId", "content", "description", "imageUrl", "imageAltText", "urlSlug",
                       "author", "categories"], location=True)
    async def create_blog_post(self, args):
        # the platform rejects posts without a publication date, whatever the status
        body = pick(args, "title", "locationId", "blogId", "imageUrl", "description", "content", "status",
                    "imageAltText", "categories", "tags", "author", "urlSlug", "canonicalLink", "publishedAt",
                    rename=CONTENT_FIELD,
                    defaults={"status": "DRAFT", "tags": [], "publishedAt": utc_now_iso()})
        post = unwrap(await self.client.post("/blogs/posts", body), "data", required=True)
        return {
            "success": True,
            "blogPost": post,
            "message": f"Blog post \"{args['title']}\" created successfully with ID: {post.get('_id')}",
        }

    @tool("update_blog_post",
          "Update an existing blog post in GoHighLevel. All fields except postId and blogId are optional.", {
              "postId": _s("Blog post ID to update"),
              "blogId": _s("Blog site ID that contains the post"),
              "title": _s("Updated blog post title"),
              "content": _s("Updated HTML content of the blog post"),
              "description": _s("Updated description/excerpt of the blog post"),
              "imageUrl": _s("Updated featured image URL"),
              "imageAltText": _s("Updated alt text for the featured image"),
              "urlSlug": _s("Updated URL slug (use check_url_slug to verify availability)"),
              "author": _s("Updated author ID"),
              "categories": {**STRINGS, "description": "Updated array of category IDs"},
              "tags": {**STRINGS, "description": "Updated array of tags"},
              "status": {"type": "string", "enum": POST_STATUSES, "description": "Updated publication status"},
              "canonicalLink": _s("Updated canonical URL"),
              "publishedAt": _s("Updated ISO timestamp for publication date"),
          }, required=["postId", "blogId"], location=True)
    async def update_blog_post(self, args):
        body = pick(args, "locationId", "blogId", "title", "content", "description", "imageUrl", "imageAltText",
                    "urlSlug", "author", "categories", "tags", "status", "canonicalLink", "publishedAt",
                    rename=CONTENT_FIELD)
        post = unwrap(await self.client.put(f"/blogs/posts/{args['postId']}", body), "updatedBlogPost", required=True)
        return {"success": True, "blogPost": post, "message": "Blog post updated successfully"}

    @tool("get_blog_posts",
          "Get blog posts from a specific blog site. Use this to list and search existing blog posts.", {
              "blogId": _s("Blog site ID to get posts from (use get_blog_sites to find available blogs)"),
              "limit": {"type": "number", "description": "Number of posts to retrieve (default: 10, max recommended: 50)",
                        "default": 10},
              "offset": {"type": "number", "description": "Number of posts to skip for pagination (default: 0)",
                         "default": 0},
              "searchTerm": _s("Optional search term to filter posts by title or content"),
              "status": {"type": "string", "enum": POST_STATUSES, "description": "Optional filter by publication status"},
          }, required=["blogId"], location=True)
    async def get_blog_posts(self, args):
        params = pick(args, "locationId", "blogId", "searchTerm", "status", defaults={"limit": 10, "offset": 0})
        posts = unwrap(await self.client.get("/blogs/posts/all", params), "blogs", default=[])
        return {
            "success": True,
            "posts": posts,
            "count": len(posts),
            "message": f"Retrieved {len(posts)} blog posts from blog {args['blogId']}",
        }

    @tool("get_blog_sites",
          "Get all blog sites for the current location. Use this to find available blogs before creating or "
          "managing posts.", {
              "limit": _page("blogs to retrieve", 10),
              "skip": {"type": "number", "description": "Number of blogs to skip for pagination (default: 0)", "default": 0},
              "searchTerm": _s("Optional search term to filter blogs by name"),
          }, location=True)
    async def get_blog_sites(self, args):
        params = pick(args, "locationId", "searchTerm", defaults={"skip": 0, "limit": 10})
        sites = unwrap(await self.client.get("/blogs/site/all", params), "data", default=[])
        return {"success": True, "sites": sites, "count": len(sites), "message": f"Retrieved {len(sites)} blog sites"}

    @tool("get_blog_authors",
          "Get all available blog authors for the current location. Use this to find author IDs for creating "
          "blog posts.", {
              "limit": _page("authors to retrieve", 10),
              "offset": {"type": "number", "description": "Number of authors to skip for pagination (default: 0)",
                         "default": 0},
          }, location=True)
    async def get_blog_authors(self, args):
        params = pick(args, "locationId", defaults={"limit": 10, "offset": 0})
        authors = unwrap(await self.client.get("/blogs/authors", params), "authors", default=[])
        return {"success": True, "authors": authors, "count": len(authors),
                "message": f"Retrieved {len(authors)} blog authors"}

    @tool("get_blog_categories",
          "Get all available blog categories for the current location. Use this to find category IDs for "
          "creating blog posts.", {
              "limit": _page("categories to retrieve", 10),
              "offset": {"type": "number", "description": "Number of categories to skip for pagination (default: 0)",
                         "default": 0},
          }, location=True)
    async def get_blog_categories(self, args):
        params = pick(args, "locationId", defaults={"limit": 10, "offset": 0})
        categories = unwrap(await self.client.get("/blogs/categories", params), "categories", default=[])
        return {"success": True, "categories": categories, "count": len(categories),
                "message": f"Retrieved {len(categories)} blog categories"}

    @tool("check_url_slug",
          "Check if a URL slug is available for use. Use this before creating or updating blog posts to ensure "
          "unique URLs.", {
              "urlSlug": _s("URL slug to check for availability"),
              "postId": _s("Optional post ID when updating an existing post (to exclude itself from the check)"),
          }, required=["urlSlug"], location=True, action="check URL slug")
    async def check_url_slug(self, args):
        params = pick(args, "locationId", "urlSlug", "postId")
        exists = bool(unwrap(await self.client.get("/blogs/posts/url-slug-exists", params), "exists"))
        slug = args["urlSlug"]
        return {
            "success": True,
            "urlSlug": slug,
            "exists": exists,
            "available": not exists,
            "message": f'URL slug "{slug}" is already in use' if exists else f'URL slug "{slug}" is available',
        }
