#! /usr/bin/env python3

"""Expose an encoder over HTTP.

    POST /   with form field numbers=1,2,3   => 200 text/plain: the id
    GET /ID                                  => 200 text/plain: 1,2,3
"""

import http.server
import re
import sys
import urllib.parse

from sqidish_errors import SqidsError

MAX_POST_SIZE = 2000

class Listener(http.server.BaseHTTPRequestHandler):

    encoder = None
    strict_valid_uri = None

    @classmethod
    def configure(cls, encoder):
        """Returns subclass of CLS bound to ENCODER, an instance of Sqids"""
        # Alphabet may hold regex metacharacters:
        valid_uri = re.compile('^/[' + re.escape(encoder.alphabet) + ']+$')
        return type('Bound' + cls.__name__, (cls,),
                    {'encoder': encoder, 'strict_valid_uri': valid_uri})

    def do_POST(self):
        """Receive comma-separated numbers, and respond with their id"""
        header = self.headers.get('Content-Length') or '0'
        if not header.isdecimal():
            print("error=invalid content-length={!r}".format(header),
                  file=sys.stderr)
            self.respond(400, "400 Bad Request")
            return
        length = int(header)
        if length > MAX_POST_SIZE:
            self.respond(413, "413 Payload Too Large")
            return
        # FIXME: Attempt to extract charset from headers, defaulting to utf-8
        post_data = urllib.parse.parse_qs(self.rfile.read(length).decode('utf-8'))
        field = post_data.get('numbers', [''])[0]
        try:
            numbers = [int(value) for value in field.split(',')]
            sqid = self.encoder.encode(numbers)
        except (ValueError, SqidsError) as error:
            print("error=invalid-input numbers={!r} reason={}"
                  .format(field, error), file=sys.stderr)
            self.respond(400, "400 Bad Request")
            return

        print("status=encoded sqid={} numbers={}".format(sqid, field),
              file=sys.stderr)
        self.respond(200, sqid)

    def do_GET(self, suppress_content=False):
        """Resolve an id to its comma-separated numbers"""
        relative_uri = urllib.parse.urlsplit(self.path).path
        if self.strict_valid_uri.match(relative_uri) is None:
            print("error=invalid uri={}".format(relative_uri), file=sys.stderr)
            self.respond(404, "404 Not Found", suppress_content)
            return
        sqid = relative_uri[1:]
        try:
            numbers = self.encoder.decode(sqid)
        except SqidsError as error:
            print("error=undecodable sqid={} reason={}".format(sqid, error),
                  file=sys.stderr)
            numbers = []
        if not numbers:
            self.respond(404, "404 Not Found", suppress_content)
            return

        content = ','.join(str(number) for number in numbers)
        print("status=decoded sqid={} numbers={}".format(sqid, content),
              file=sys.stderr)
        self.respond(200, content, suppress_content)

    def do_HEAD(self):
        self.do_GET(True)

    def respond(self, status, content, suppress_content=False):
        body = bytes(content, 'utf-8')
        self.send_response(status)
        self.send_header('Content-Type', 'text/plain;charset=utf-8')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        if not suppress_content:
            self.wfile.write(body)

def make_server(encoder, address='', port=8000,
                server_class=http.server.ThreadingHTTPServer,
                handler_class=Listener):
    """Returns server bound to ADDRESS and PORT, not yet serving"""
    return server_class((address, port), handler_class.configure(encoder))

def run(encoder, address='', port=8000,
        server_class=http.server.ThreadingHTTPServer, handler_class=Listener):
    httpd = make_server(encoder, address, port, server_class, handler_class)
    try:
        httpd.serve_forever()
    finally:
        httpd.server_close()
