"""Basic Locust file for performance testing the Hackernews Clone API.

To run:
1. Install the dev extra (`pip install -e ".[dev]"`).
2. Run locust -f performance_tests/locustfile.py
3. Open your browser to http://localhost:8089 (or the port specified by Locust).
4. Configure the number of users, spawn rate, and host (e.g., http://localhost:8000).
5. Start Swarming.
"""

import random
import time

from locust import HttpUser, between, task

FEED_SEARCH_TERMS = ["graphql", "python", "locust", "news"]


class ApiUser(HttpUser):
    wait_time = between(1, 3)  # seconds
    graphql_endpoint = "/graphql"
    # Link ids posted during the test run, shared by all users
    link_ids: list[str] = []

    def post_graphql(self, query: str, variables: dict, name: str) -> dict | None:
        """Posts one operation and reports GraphQL errors as Locust failures."""
        with self.client.post(
            self.graphql_endpoint,
            json={"query": query, "variables": variables},
            catch_response=True,
            name=name,
        ) as response:
            if response.status_code != 200:
                response.failure(
                    f"{name} failed with status {response.status_code}: {response.text}"
                )
                return None
            data = response.json()
            if data.get("errors"):
                response.failure(f"GraphQL error in {name}: {data['errors']}")
                return None
            response.success()
            return data["data"]

    @task(1)
    def health_check(self):
        self.client.get("/health", name="App: Health Check")

    @task(5)  # Reading the feed is the common case
    def read_feed(self):
        feed_query = """
            query Feed($filterNeedle: String, $take: Int) {
                feed(filterNeedle: $filterNeedle, take: $take) {
                    id url description
                    comments { id body }
                }
            }
        """
        variables = {"take": random.randint(1, 50)}
        if random.random() < 0.5:
            variables["filterNeedle"] = random.choice(FEED_SEARCH_TERMS)
        self.post_graphql(feed_query, variables, name="GraphQL: Feed")

    @task(2)
    def post_link(self):
        post_link_mutation = """
            mutation PostLink($url: String!, $description: String!) {
                postLink(url: $url, description: $description) { id }
            }
        """
        stamp = time.time()
        variables = {
            "url": f"https://example.com/locust/{stamp}",
            "description": f"Locust {random.choice(FEED_SEARCH_TERMS)} link {stamp}",
        }
        data = self.post_graphql(post_link_mutation, variables, name="GraphQL: Post Link")
        if data:
            self.link_ids.append(data["postLink"]["id"])

    @task(2)
    def post_comment(self):
        if not self.link_ids:
            return

        post_comment_mutation = """
            mutation PostComment($linkId: ID!, $body: String!) {
                postCommentOnLink(linkId: $linkId, body: $body) { id }
            }
        """
        variables = {
            "linkId": random.choice(self.link_ids),
            "body": f"Locust comment {time.time()}",
        }
        self.post_graphql(post_comment_mutation, variables, name="GraphQL: Post Comment")
