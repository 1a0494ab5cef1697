# Copyright 2023-2024 David Kneipp <david@davidkneipp.com>
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
class Banners:

    def apiService(self) -> str:
        bannerText = """

 ######             ##             ####
 ##   ##           ####           ##  ##
 ##   ##  ##  ##  ##  ##  ##  ##  ##
 ######   ##  ##  ######  ##  ##  ##
 ##       ##  ##  ##  ##  ##  ##  ##
 ##       ##  ##  ##  ##  ##  ##  ##  ##
 ##        #####  ##  ##   #####   ####
              ##
           ####

                API Service

"""
        return bannerText
